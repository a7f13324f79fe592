from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.modalidade.entities import ModalidadeLicitacao

from .campos import FormularioDTO


class ModalidadeInDTO(FormularioDTO):
    descricao: str = Field(min_length=3)
    observacoes: str = ""

    def para_dominio(self, registro_id: str) -> ModalidadeLicitacao:
        return ModalidadeLicitacao(id=registro_id, descricao=self.descricao, observacoes=self.observacoes)


class ModalidadeDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("descricao", "Descricao"),
        ("observacoes", "Observacoes"),
    )

    id: str
    descricao: str
    observacoes: str

    @classmethod
    def de_dominio(cls, m: ModalidadeLicitacao) -> "ModalidadeDTO":
        return cls(id=m.id, descricao=m.descricao, observacoes=m.observacoes)
