import uuid
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.documentos.value_objects import CNPJ
from cadastro.domain.entidade.entities import TipoEntidade
from cadastro.domain.municipio.entities import EntidadeVinculada, Municipio

from .campos import CNPJCampo, FormularioDTO


class EntidadeVinculadaInDTO(FormularioDTO):
    id: str | None = None
    cnpj: CNPJCampo
    razao_social: str = Field(min_length=3)
    tipo_entidade: TipoEntidade


class MunicipioInDTO(FormularioDTO):
    nome: str = Field(min_length=3)
    codigo_ibge: str = Field(pattern=r"^\d{7}$")
    quantidade_habitantes: int = Field(ge=1)
    distancia_km: Decimal = Field(ge=0)
    observacoes: str = ""
    entidades_vinculadas: list[EntidadeVinculadaInDTO] = Field(default_factory=list)

    def para_dominio(self, registro_id: str) -> Municipio:
        return Municipio(
            id=registro_id,
            nome=self.nome,
            codigo_ibge=self.codigo_ibge,
            quantidade_habitantes=self.quantidade_habitantes,
            distancia_km=self.distancia_km,
            observacoes=self.observacoes,
            entidades_vinculadas=tuple(
                EntidadeVinculada(
                    id=v.id or str(uuid.uuid4()),
                    cnpj=CNPJ(v.cnpj),
                    razao_social=v.razao_social,
                    tipo_entidade=v.tipo_entidade,
                )
                for v in self.entidades_vinculadas
            ),
        )


class EntidadeVinculadaDTO(BaseModel):
    id: str
    cnpj: str
    razao_social: str
    tipo_entidade: str


class MunicipioDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("nome", "Nome"),
        ("codigo_ibge", "Codigo IBGE"),
        ("quantidade_habitantes", "Habitantes"),
        ("distancia_km", "Distancia (km)"),
    )

    id: str
    nome: str
    codigo_ibge: str
    quantidade_habitantes: int
    distancia_km: str  # Decimal serializado como string
    observacoes: str
    entidades_vinculadas: list[EntidadeVinculadaDTO]

    @classmethod
    def de_dominio(cls, m: Municipio) -> "MunicipioDTO":
        return cls(
            id=m.id,
            nome=m.nome,
            codigo_ibge=m.codigo_ibge,
            quantidade_habitantes=m.quantidade_habitantes,
            distancia_km=str(m.distancia_km),
            observacoes=m.observacoes,
            entidades_vinculadas=[
                EntidadeVinculadaDTO(
                    id=v.id,
                    cnpj=v.cnpj.formatado,
                    razao_social=v.razao_social,
                    tipo_entidade=v.tipo_entidade.value,
                )
                for v in m.entidades_vinculadas
            ],
        )
