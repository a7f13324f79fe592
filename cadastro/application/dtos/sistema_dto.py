import uuid
from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.sistema.entities import Modulo, Sistema

from .campos import FormularioDTO


class ModuloInDTO(FormularioDTO):
    id: str | None = None
    nome: str = Field(min_length=2)
    descricao: str = Field(min_length=3)


class SistemaInDTO(FormularioDTO):
    sigla: str = Field(min_length=2)
    nome: str = Field(min_length=3)
    descricao: str = Field(min_length=3)
    modulos: list[ModuloInDTO] = Field(default_factory=list)

    def para_dominio(self, registro_id: str) -> Sistema:
        return Sistema(
            id=registro_id,
            sigla=self.sigla,
            nome=self.nome,
            descricao=self.descricao,
            modulos=tuple(
                Modulo(id=m.id or str(uuid.uuid4()), nome=m.nome, descricao=m.descricao) for m in self.modulos
            ),
        )


class ModuloDTO(BaseModel):
    id: str
    nome: str
    descricao: str


class SistemaDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("sigla", "Sigla"),
        ("nome", "Nome"),
        ("descricao", "Descricao"),
    )

    id: str
    sigla: str
    nome: str
    descricao: str
    modulos: list[ModuloDTO]

    @classmethod
    def de_dominio(cls, s: Sistema) -> "SistemaDTO":
        return cls(
            id=s.id,
            sigla=s.sigla,
            nome=s.nome,
            descricao=s.descricao,
            modulos=[ModuloDTO(id=m.id, nome=m.nome, descricao=m.descricao) for m in s.modulos],
        )
