# cadastro/infrastructure/repositories/duckdb_indice_repo.py
from __future__ import annotations

from decimal import Decimal

from cadastro.domain.indice.entities import IndiceCorrecao

from .duckdb_registro_repo import DuckDBRegistroRepo


class DuckDBIndiceRepo(DuckDBRegistroRepo[IndiceCorrecao]):
    tabela = "indices"
    colunas = ("nome", "mes", "ano", "valor")
    colunas_busca = ("nome", "CAST(ano AS VARCHAR)")
    ordem = "ano DESC, mes DESC, nome"

    def _hidratar(self, row: tuple) -> IndiceCorrecao:  # type: ignore[type-arg]
        return IndiceCorrecao(
            id=str(row[0]),
            nome=str(row[1]),
            mes=str(row[2]),
            ano=int(row[3]),
            valor=Decimal(str(row[4])),
        )

    def _valores(self, i: IndiceCorrecao) -> list[object]:
        return [i.nome, i.mes, i.ano, i.valor]
