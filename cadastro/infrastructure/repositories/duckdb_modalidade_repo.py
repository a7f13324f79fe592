# cadastro/infrastructure/repositories/duckdb_modalidade_repo.py
from __future__ import annotations

from cadastro.domain.modalidade.entities import ModalidadeLicitacao

from .duckdb_registro_repo import DuckDBRegistroRepo


class DuckDBModalidadeRepo(DuckDBRegistroRepo[ModalidadeLicitacao]):
    tabela = "modalidades"
    colunas = ("descricao", "observacoes")
    colunas_busca = ("descricao",)
    ordem = "descricao"

    def _hidratar(self, row: tuple) -> ModalidadeLicitacao:  # type: ignore[type-arg]
        return ModalidadeLicitacao(id=str(row[0]), descricao=str(row[1]), observacoes=str(row[2]) if row[2] else "")

    def _valores(self, m: ModalidadeLicitacao) -> list[object]:
        return [m.descricao, m.observacoes]
