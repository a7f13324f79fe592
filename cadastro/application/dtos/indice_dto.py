from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field

from cadastro.domain.indice.entities import ANO_MAXIMO, ANO_MINIMO, IndiceCorrecao

from .campos import FormularioDTO, MesCampo


class IndiceInDTO(FormularioDTO):
    nome: str = Field(min_length=2)
    mes: MesCampo
    ano: int = Field(ge=ANO_MINIMO, le=ANO_MAXIMO)
    valor: Decimal = Field(ge=0)

    def para_dominio(self, registro_id: str) -> IndiceCorrecao:
        return IndiceCorrecao(id=registro_id, nome=self.nome, mes=self.mes, ano=self.ano, valor=self.valor)


class IndiceDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("nome", "Indice"),
        ("mes_nome", "Mes"),
        ("ano", "Ano"),
        ("valor", "Valor"),
    )

    id: str
    nome: str
    mes: str
    mes_nome: str
    ano: int
    valor: str

    @classmethod
    def de_dominio(cls, i: IndiceCorrecao) -> "IndiceDTO":
        return cls(id=i.id, nome=i.nome, mes=i.mes, mes_nome=i.mes_nome, ano=i.ano, valor=str(i.valor))
