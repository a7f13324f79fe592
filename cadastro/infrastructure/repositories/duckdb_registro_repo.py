# cadastro/infrastructure/repositories/duckdb_registro_repo.py
#
# Base comum dos repositorios de cadastro.
#
# Design decisions:
#   - Cada subclasse declara tabela, colunas (na ordem do SELECT), colunas de
#     busca e implementa _hidratar/_valores. O SQL e montado aqui a partir
#     desses nomes, que vem de codigo interno e nunca de input do usuario.
#   - Valores sempre por prepared statement (?).
#   - Registros com filhos (municipio, sistema, contrato) sobrescrevem
#     _carregar e _gravar_filhos; pai e filhos sao gravados na mesma
#     transacao e os filhos sao regravados por inteiro a cada alteracao.
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import ClassVar, Generic, TypeVar

import duckdb

from cadastro.domain.documentos.validadores import apenas_digitos

E = TypeVar("E")


class DuckDBRegistroRepo(Generic[E]):
    tabela: ClassVar[str]
    colunas: ClassVar[tuple[str, ...]]  # sem o id
    colunas_busca: ClassVar[tuple[str, ...]]
    colunas_documento: ClassVar[tuple[str, ...]] = ()  # buscadas tambem so por digitos
    ordem: ClassVar[str]
    tabelas_filhas: ClassVar[tuple[str, ...]] = ()
    coluna_pai: ClassVar[str] = ""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    # --- leitura ---------------------------------------------------------

    def _select(self) -> str:
        return f"SELECT id, {', '.join(self.colunas)} FROM {self.tabela}"

    def listar(self) -> list[E]:
        rows = self._conn.execute(f"{self._select()} ORDER BY {self.ordem}").fetchall()  # noqa: S608
        return [self._carregar(r) for r in rows]

    def pesquisar(self, termo: str) -> list[E]:
        """Busca parcial sem diferenciar caixa nas colunas de busca."""
        termo = termo.strip()
        if not termo:
            return self.listar()

        conditions = [f"{c} ILIKE ?" for c in self.colunas_busca]
        params: list[object] = [f"%{termo}%"] * len(self.colunas_busca)
        digitos = apenas_digitos(termo)
        if digitos:
            conditions.extend(f"{c} LIKE ?" for c in self.colunas_documento)
            params.extend([f"%{digitos}%"] * len(self.colunas_documento))

        rows = self._conn.execute(
            f"{self._select()} WHERE {' OR '.join(conditions)} ORDER BY {self.ordem}",  # noqa: S608
            params,
        ).fetchall()
        return [self._carregar(r) for r in rows]

    def obter(self, registro_id: str) -> E | None:
        row = self._conn.execute(
            f"{self._select()} WHERE id = ?", [registro_id]  # noqa: S608
        ).fetchone()
        return self._carregar(row) if row else None

    def contar(self) -> int:
        row = self._conn.execute(f"SELECT count(*) FROM {self.tabela}").fetchone()  # noqa: S608
        return int(row[0]) if row else 0

    # --- escrita ---------------------------------------------------------

    def incluir(self, registro: E) -> None:
        placeholders = ", ".join("?" for _ in range(len(self.colunas) + 1))
        sql = f"INSERT INTO {self.tabela} (id, {', '.join(self.colunas)}) VALUES ({placeholders})"  # noqa: S608
        self._em_transacao(lambda: self._conn.execute(sql, [self._id(registro), *self._valores(registro)]), registro)

    def alterar(self, registro: E) -> None:
        atribuicoes = ", ".join(f"{c} = ?" for c in self.colunas)
        sql = f"UPDATE {self.tabela} SET {atribuicoes} WHERE id = ?"  # noqa: S608
        self._em_transacao(lambda: self._conn.execute(sql, [*self._valores(registro), self._id(registro)]), registro)

    def excluir(self, registro_id: str) -> None:
        self._conn.begin()
        try:
            for filha in self.tabelas_filhas:
                self._conn.execute(f"DELETE FROM {filha} WHERE {self.coluna_pai} = ?", [registro_id])  # noqa: S608
            self._conn.execute(f"DELETE FROM {self.tabela} WHERE id = ?", [registro_id])  # noqa: S608
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _em_transacao(self, gravar_pai: Callable[[], object], registro: E) -> None:
        self._conn.begin()
        try:
            gravar_pai()
            if self.tabelas_filhas:
                registro_id = self._id(registro)
                for filha in self.tabelas_filhas:
                    self._conn.execute(f"DELETE FROM {filha} WHERE {self.coluna_pai} = ?", [registro_id])  # noqa: S608
                self._gravar_filhos(registro)
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _inserir_filhos(self, tabela: str, colunas: Sequence[str], linhas: Sequence[Sequence[object]]) -> None:
        if not linhas:
            return
        placeholders = ", ".join("?" for _ in colunas)
        self._conn.executemany(
            f"INSERT INTO {tabela} ({', '.join(colunas)}) VALUES ({placeholders})",  # noqa: S608
            [list(linha) for linha in linhas],
        )

    def _filhos(self, tabela: str, colunas: Sequence[str], registro_id: str, ordem: str) -> list[tuple]:  # type: ignore[type-arg]
        return self._conn.execute(
            f"SELECT {', '.join(colunas)} FROM {tabela} WHERE {self.coluna_pai} = ? ORDER BY {ordem}",  # noqa: S608
            [registro_id],
        ).fetchall()

    # --- ganchos das subclasses ------------------------------------------

    def _carregar(self, row: tuple) -> E:  # type: ignore[type-arg]
        return self._hidratar(row)

    def _id(self, registro: E) -> str:
        return str(registro.id)  # type: ignore[attr-defined]

    def _hidratar(self, row: tuple) -> E:  # type: ignore[type-arg]
        raise NotImplementedError

    def _valores(self, registro: E) -> list[object]:
        raise NotImplementedError

    def _gravar_filhos(self, registro: E) -> None:
        return None
