# cadastro/infrastructure/repositories/duckdb_sistema_repo.py
from __future__ import annotations

from cadastro.domain.sistema.entities import Modulo, Sistema

from .duckdb_registro_repo import DuckDBRegistroRepo

_COLUNAS_MODULO = ("id", "sistema_id", "nome", "descricao")


class DuckDBSistemaRepo(DuckDBRegistroRepo[Sistema]):
    tabela = "sistemas"
    colunas = ("sigla", "nome", "descricao")
    colunas_busca = ("sigla", "nome")
    ordem = "sigla"
    tabelas_filhas = ("sistema_modulos",)
    coluna_pai = "sistema_id"

    def _carregar(self, row: tuple) -> Sistema:  # type: ignore[type-arg]
        modulos = tuple(
            Modulo(id=str(r[0]), nome=str(r[2]), descricao=str(r[3]))
            for r in self._filhos("sistema_modulos", _COLUNAS_MODULO, str(row[0]), "nome")
        )
        return Sistema(id=str(row[0]), sigla=str(row[1]), nome=str(row[2]), descricao=str(row[3]), modulos=modulos)

    def _valores(self, s: Sistema) -> list[object]:
        return [s.sigla, s.nome, s.descricao]

    def _gravar_filhos(self, s: Sistema) -> None:
        self._inserir_filhos(
            "sistema_modulos", _COLUNAS_MODULO, [(m.id, s.id, m.nome, m.descricao) for m in s.modulos]
        )
