# cadastro/infrastructure/repositories/duckdb_usuario_repo.py
from __future__ import annotations

from datetime import date

from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.usuario.entities import Usuario

from .duckdb_registro_repo import DuckDBRegistroRepo


def _permissoes_de_coluna(valor: object) -> frozenset[str]:
    if not valor:
        return frozenset()
    return frozenset(p for p in str(valor).split(",") if p)


class DuckDBUsuarioRepo(DuckDBRegistroRepo[Usuario]):
    tabela = "usuarios"
    colunas = ("nome", "cpf", "data_nascimento", "senha_hash", "is_admin", "permissoes")
    colunas_busca = ("nome",)
    colunas_documento = ("cpf",)
    ordem = "nome"

    def buscar_por_cpf(self, cpf: CPF) -> Usuario | None:
        row = self._conn.execute(f"{self._select()} WHERE cpf = ?", [cpf.valor]).fetchone()  # noqa: S608
        return self._hidratar(row) if row else None

    def _hidratar(self, row: tuple) -> Usuario:  # type: ignore[type-arg]
        return Usuario(
            id=str(row[0]),
            nome=str(row[1]),
            cpf=CPF(str(row[2])),
            data_nascimento=row[3] if isinstance(row[3], date) else None,
            senha_hash=str(row[4]),
            is_admin=bool(row[5]),
            permissoes=_permissoes_de_coluna(row[6]),
        )

    def _valores(self, u: Usuario) -> list[object]:
        return [u.nome, u.cpf.valor, u.data_nascimento, u.senha_hash, u.is_admin, ",".join(sorted(u.permissoes))]
