from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.documentos.mascaras import telefone_mask
from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.responsavel.entities import Responsavel

from .campos import CPFCampo, FormularioDTO, TelefoneCampo


class ResponsavelInDTO(FormularioDTO):
    nome: str = Field(min_length=3)
    cpf: CPFCampo
    rg: str = Field(min_length=5)
    celular: TelefoneCampo

    def para_dominio(self, registro_id: str) -> Responsavel:
        return Responsavel(id=registro_id, nome=self.nome, cpf=CPF(self.cpf), rg=self.rg, celular=self.celular)


class ResponsavelDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("nome", "Nome"),
        ("cpf", "CPF"),
        ("rg", "RG"),
        ("celular", "Celular"),
    )

    id: str
    nome: str
    cpf: str  # formatado
    rg: str
    celular: str

    @classmethod
    def de_dominio(cls, r: Responsavel) -> "ResponsavelDTO":
        return cls(id=r.id, nome=r.nome, cpf=r.cpf.formatado, rg=r.rg, celular=telefone_mask(r.celular))
