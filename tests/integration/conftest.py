# tests/integration/conftest.py
from __future__ import annotations

import os
import random
from collections.abc import Callable, Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

from cadastro.domain.documentos.validadores import digitos_verificadores_cnpj, digitos_verificadores_cpf

ADMIN_CPF = "52998224725"
ADMIN_SENHA = "admin-teste"

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["ADMIN_CPF"] = ADMIN_CPF
os.environ["ADMIN_SENHA"] = ADMIN_SENHA
os.environ["ADMIN_NOME"] = "Admin Teste"
os.environ["SENHA_BCRYPT_ROUNDS"] = "4"

_rng = random.Random(1234)
_emitidos: set[str] = {ADMIN_CPF, "11222333000181"}


def gerar_cpf() -> str:
    """CPF valido e inedito na sessao de testes."""
    while True:
        base = "".join(_rng.choice("0123456789") for _ in range(9))
        cpf = base + digitos_verificadores_cpf(base)
        if len(set(base)) > 1 and cpf not in _emitidos:
            _emitidos.add(cpf)
            return cpf


def gerar_cnpj() -> str:
    while True:
        base = "".join(_rng.choice("0123456789") for _ in range(8)) + "0001"
        cnpj = base + digitos_verificadores_cnpj(base)
        if cnpj not in _emitidos:
            _emitidos.add(cnpj)
            return cnpj


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema da aplicacao."""
    from cadastro.infrastructure.duckdb_connection import inicializar_schema

    conn = duckdb.connect(":memory:")
    inicializar_schema(conn)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado.

    O startup cria o administrador de ADMIN_CPF/ADMIN_SENHA.
    """
    from cadastro.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar as variaveis acima
    from cadastro.infrastructure.config import get_settings
    get_settings.cache_clear()

    from cadastro.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


def _login(client: TestClient, cpf: str, senha: str) -> dict[str, str]:
    response = client.post("/api/auth/login", json={"cpf": cpf, "senha": senha})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture(scope="session")
def admin_headers(client: TestClient) -> dict[str, str]:
    return _login(client, ADMIN_CPF, ADMIN_SENHA)


@pytest.fixture()
def login_com_permissoes(
    client: TestClient, admin_headers: dict[str, str]
) -> Callable[..., dict[str, str]]:
    """Cria um usuario com as permissoes dadas e devolve os headers da sessao."""

    def _criar(*permissoes: str, is_admin: bool = False) -> dict[str, str]:
        cpf = gerar_cpf()
        response = client.post(
            "/api/usuarios",
            json={
                "nome": "Usuario de Teste",
                "cpf": cpf,
                "senha": "senha-teste",
                "is_admin": is_admin,
                "permissoes": list(permissoes),
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return _login(client, cpf, "senha-teste")

    return _criar


@pytest.fixture()
def novo_cpf() -> Callable[[], str]:
    return gerar_cpf


@pytest.fixture()
def novo_cnpj() -> Callable[[], str]:
    return gerar_cnpj
