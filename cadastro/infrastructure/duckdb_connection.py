# cadastro/infrastructure/duckdb_connection.py
from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import duckdb

from .config import get_settings

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def inicializar_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Aplica schema.sql. Idempotente: todas as instrucoes usam IF NOT EXISTS."""
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        _connection = duckdb.connect(get_settings().duckdb_path)
        inicializar_schema(_connection)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn


def get_cursor() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Um cursor por requisicao: a conexao principal nao e compartilhada entre threads."""
    cursor = get_connection().cursor()
    try:
        yield cursor
    finally:
        cursor.close()
