# cadastro/infrastructure/repositories/duckdb_stats_repo.py
from __future__ import annotations

import duckdb

# chave exibida no painel -> tabela
TABELAS_PAINEL: dict[str, str] = {
    "entidades": "entidades",
    "municipios": "municipios",
    "sistemas": "sistemas",
    "indices": "indices",
    "modalidades": "modalidades",
    "responsaveis": "responsaveis",
    "contratos": "contratos",
    "usuarios": "usuarios",
}


class DuckDBStatsRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def obter_stats(self) -> dict[str, object]:
        """Contagens do painel lidas direto do banco."""
        totais = {chave: self._contar(tabela) for chave, tabela in TABELAS_PAINEL.items()}
        ativos = self._conn.execute(
            "SELECT count(*) FROM contratos WHERE situacao = 'Ativo'"
        ).fetchone()
        return {
            "totais": totais,
            "contratos_ativos": int(ativos[0]) if ativos else 0,
        }

    def _contar(self, tabela: str) -> int:
        # nome da tabela vem de TABELAS_PAINEL, nunca de input do usuario
        row = self._conn.execute(f"SELECT count(*) FROM {tabela}").fetchone()  # noqa: S608
        return int(row[0]) if row else 0
