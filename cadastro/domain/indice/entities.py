# cadastro/domain/indice/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

MESES: dict[str, str] = {
    "01": "Janeiro",
    "02": "Fevereiro",
    "03": "Marco",
    "04": "Abril",
    "05": "Maio",
    "06": "Junho",
    "07": "Julho",
    "08": "Agosto",
    "09": "Setembro",
    "10": "Outubro",
    "11": "Novembro",
    "12": "Dezembro",
}

ANO_MINIMO = 1900
ANO_MAXIMO = 2100


@dataclass(frozen=True)
class IndiceCorrecao:
    """Valor mensal de um indice de correcao (IPCA, IGPM, ...).

    Unico pela combinacao nome (sem caixa) + mes + ano.
    """

    id: str
    nome: str
    mes: str  # "01".."12"
    ano: int
    valor: Decimal

    def __post_init__(self) -> None:
        if self.mes not in MESES:
            raise ValueError(f"Mes invalido: {self.mes}")
        if not ANO_MINIMO <= self.ano <= ANO_MAXIMO:
            raise ValueError(f"Ano invalido: {self.ano}")
        if self.valor < Decimal("0"):
            raise ValueError("Valor do indice nao pode ser negativo")

    @property
    def mes_nome(self) -> str:
        return MESES[self.mes]
