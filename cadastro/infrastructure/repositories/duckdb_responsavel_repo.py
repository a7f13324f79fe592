# cadastro/infrastructure/repositories/duckdb_responsavel_repo.py
from __future__ import annotations

from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.responsavel.entities import Responsavel

from .duckdb_registro_repo import DuckDBRegistroRepo


class DuckDBResponsavelRepo(DuckDBRegistroRepo[Responsavel]):
    tabela = "responsaveis"
    colunas = ("nome", "cpf", "rg", "celular")
    colunas_busca = ("nome",)
    colunas_documento = ("cpf",)
    ordem = "nome"

    def _hidratar(self, row: tuple) -> Responsavel:  # type: ignore[type-arg]
        return Responsavel(
            id=str(row[0]), nome=str(row[1]), cpf=CPF(str(row[2])), rg=str(row[3]), celular=str(row[4])
        )

    def _valores(self, r: Responsavel) -> list[object]:
        return [r.nome, r.cpf.valor, r.rg, r.celular]
