# cadastro/domain/municipio/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from cadastro.domain.documentos.value_objects import CNPJ
from cadastro.domain.entidade.entities import TipoEntidade


@dataclass(frozen=True)
class EntidadeVinculada:
    id: str
    cnpj: CNPJ
    razao_social: str
    tipo_entidade: TipoEntidade


@dataclass(frozen=True)
class Municipio:
    """Municipio identificado pelo codigo IBGE (7 digitos)."""

    id: str
    nome: str
    codigo_ibge: str
    quantidade_habitantes: int
    distancia_km: Decimal
    observacoes: str = ""
    entidades_vinculadas: tuple[EntidadeVinculada, ...] = ()

    def __post_init__(self) -> None:
        if not (self.codigo_ibge.isdigit() and len(self.codigo_ibge) == 7):
            raise ValueError("Codigo IBGE deve ter 7 digitos")
        if self.quantidade_habitantes < 0:
            raise ValueError("Quantidade de habitantes nao pode ser negativa")
        if self.distancia_km < Decimal("0"):
            raise ValueError("Distancia nao pode ser negativa")
