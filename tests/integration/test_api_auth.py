# tests/integration/test_api_auth.py
import os
from collections.abc import Callable

from fastapi.testclient import TestClient

ADMIN_CPF = os.environ["ADMIN_CPF"]
ADMIN_SENHA = os.environ["ADMIN_SENHA"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_login_admin_devolve_token_e_sessao(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"cpf": "529.982.247-25", "senha": ADMIN_SENHA})
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["tipo"] == "bearer"
    assert data["sessao"]["is_admin"] is True
    assert data["sessao"]["cpf"] == "***.982.247-**"
    assert ADMIN_CPF not in response.text


def test_login_senha_errada_401(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"cpf": ADMIN_CPF, "senha": "errada"})
    assert response.status_code == 401


def test_login_cpf_invalido_401(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"cpf": "123", "senha": ADMIN_SENHA})
    assert response.status_code == 401


def test_login_cpf_inexistente_401(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"cpf": "11144477735", "senha": ADMIN_SENHA})
    assert response.status_code == 401


def test_me_sem_token_401(client: TestClient) -> None:
    assert client.get("/api/auth/me").status_code == 401


def test_me_token_desconhecido_401(client: TestClient) -> None:
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer nao-existe"})
    assert response.status_code == 401


def test_me_com_sessao(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/api/auth/me", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["nome"] == "Admin Teste"


def test_logout_encerra_sessao(client: TestClient) -> None:
    login = client.post("/api/auth/login", json={"cpf": ADMIN_CPF, "senha": ADMIN_SENHA}).json()
    headers = {"Authorization": f"Bearer {login['token']}"}
    assert client.post("/api/auth/logout", headers=headers).status_code == 204
    assert client.get("/api/auth/me", headers=headers).status_code == 401


def test_alterar_senha(
    client: TestClient,
    admin_headers: dict[str, str],
    novo_cpf: Callable[[], str],
) -> None:
    cpf = novo_cpf()
    criado = client.post(
        "/api/usuarios",
        json={"nome": "Carlos Dias", "cpf": cpf, "senha": "senha-teste", "permissoes": ["view"]},
        headers=admin_headers,
    )
    assert criado.status_code == 201
    token = client.post("/api/auth/login", json={"cpf": cpf, "senha": "senha-teste"}).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    curta = {"senha_atual": "senha-teste", "nova_senha": "123", "confirmacao": "123"}
    assert client.put("/api/auth/senha", json=curta, headers=headers).status_code == 422

    diferente = {"senha_atual": "senha-teste", "nova_senha": "nova-senha", "confirmacao": "outra-senha"}
    response = client.put("/api/auth/senha", json=diferente, headers=headers)
    assert response.status_code == 422
    assert "coincidem" in response.json()["detail"]

    atual_errada = {"senha_atual": "errada", "nova_senha": "nova-senha", "confirmacao": "nova-senha"}
    assert client.put("/api/auth/senha", json=atual_errada, headers=headers).status_code == 422

    ok = {"senha_atual": "senha-teste", "nova_senha": "nova-senha", "confirmacao": "nova-senha"}
    assert client.put("/api/auth/senha", json=ok, headers=headers).status_code == 204

    assert client.post("/api/auth/login", json={"cpf": cpf, "senha": "senha-teste"}).status_code == 401
    assert client.post("/api/auth/login", json={"cpf": cpf, "senha": "nova-senha"}).status_code == 200


def test_alterar_senha_exige_sessao(client: TestClient) -> None:
    ok = {"senha_atual": "a", "nova_senha": "nova-senha", "confirmacao": "nova-senha"}
    assert client.put("/api/auth/senha", json=ok).status_code == 401


def test_alterar_senha_encerra_as_outras_sessoes(
    client: TestClient,
    admin_headers: dict[str, str],
    novo_cpf: Callable[[], str],
) -> None:
    cpf = novo_cpf()
    payload = {"nome": "Helena Souza", "cpf": cpf, "senha": "senha-teste", "permissoes": ["view"]}
    assert client.post("/api/usuarios", json=payload, headers=admin_headers).status_code == 201

    def _entrar() -> dict[str, str]:
        token = client.post("/api/auth/login", json={"cpf": cpf, "senha": "senha-teste"}).json()["token"]
        return {"Authorization": f"Bearer {token}"}

    atual, outra = _entrar(), _entrar()
    troca = {"senha_atual": "senha-teste", "nova_senha": "outra-senha", "confirmacao": "outra-senha"}
    assert client.put("/api/auth/senha", json=troca, headers=atual).status_code == 204

    assert client.get("/api/auth/me", headers=atual).status_code == 200
    assert client.get("/api/auth/me", headers=outra).status_code == 401
