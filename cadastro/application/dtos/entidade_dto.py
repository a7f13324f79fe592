from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.documentos.mascaras import cep_mask, telefone_mask
from cadastro.domain.documentos.value_objects import CNPJ
from cadastro.domain.entidade.entities import Entidade, TipoEntidade

from .campos import CEPCampo, CNPJCampo, FormularioDTO, TelefoneCampo


class EntidadeInDTO(FormularioDTO):
    cnpj: CNPJCampo
    razao_social: str = Field(min_length=3)
    tipo_entidade: TipoEntidade
    rua: str = Field(min_length=3)
    numero: str = Field(min_length=1)
    bairro: str = Field(min_length=2)
    complemento: str = ""
    cidade: str = Field(min_length=2)
    cep: CEPCampo
    telefone: TelefoneCampo
    outras_informacoes: str = ""

    def para_dominio(self, registro_id: str) -> Entidade:
        return Entidade(
            id=registro_id,
            cnpj=CNPJ(self.cnpj),
            razao_social=self.razao_social,
            tipo_entidade=self.tipo_entidade,
            rua=self.rua,
            numero=self.numero,
            bairro=self.bairro,
            complemento=self.complemento,
            cidade=self.cidade,
            cep=self.cep,
            telefone=self.telefone,
            outras_informacoes=self.outras_informacoes,
        )


class EntidadeDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("cnpj", "CNPJ"),
        ("razao_social", "Razao Social"),
        ("tipo_entidade", "Tipo"),
        ("cidade", "Cidade"),
        ("telefone", "Telefone"),
    )

    id: str
    cnpj: str  # formatado
    razao_social: str
    tipo_entidade: str
    rua: str
    numero: str
    bairro: str
    complemento: str
    cidade: str
    cep: str
    telefone: str
    outras_informacoes: str

    @classmethod
    def de_dominio(cls, e: Entidade) -> "EntidadeDTO":
        return cls(
            id=e.id,
            cnpj=e.cnpj.formatado,
            razao_social=e.razao_social,
            tipo_entidade=e.tipo_entidade.value,
            rua=e.rua,
            numero=e.numero,
            bairro=e.bairro,
            complemento=e.complemento,
            cidade=e.cidade,
            cep=cep_mask(e.cep),
            telefone=telefone_mask(e.telefone),
            outras_informacoes=e.outras_informacoes,
        )
