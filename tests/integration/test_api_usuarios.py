# tests/integration/test_api_usuarios.py
from collections.abc import Callable

from fastapi.testclient import TestClient


def _criar(client: TestClient, headers: dict[str, str], cpf: str, **extra: object) -> dict[str, object]:
    payload: dict[str, object] = {"nome": "Beatriz Rocha", "cpf": cpf, "senha": "senha-123", **extra}
    response = client.post("/api/usuarios", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _login(client: TestClient, cpf: str, senha: str = "senha-123") -> dict[str, str]:
    token = client.post("/api/auth/login", json={"cpf": cpf, "senha": senha}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_usuario_novo_recebe_view_e_nao_expoe_senha(
    client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]
) -> None:
    cpf = novo_cpf()
    data = _criar(client, admin_headers, cpf)
    assert data["permissoes"] == ["view"]
    assert data["is_admin"] is False
    assert "senha" not in data
    assert "senha_hash" not in data
    assert cpf not in str(data)


def test_inclusao_sem_senha_422(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    response = client.post("/api/usuarios", json={"nome": "Sem Senha", "cpf": novo_cpf()}, headers=admin_headers)
    assert response.status_code == 422


def test_senha_curta_422(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    payload = {"nome": "Senha Curta", "cpf": novo_cpf(), "senha": "123"}
    assert client.post("/api/usuarios", json=payload, headers=admin_headers).status_code == 422


def test_permissao_desconhecida_422(
    client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]
) -> None:
    payload = {"nome": "Perm Errada", "cpf": novo_cpf(), "senha": "senha-123", "permissoes": ["root"]}
    assert client.post("/api/usuarios", json=payload, headers=admin_headers).status_code == 422


def test_menor_de_idade_422(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    payload = {"nome": "Menor", "cpf": novo_cpf(), "senha": "senha-123", "data_nascimento": "01/01/2020"}
    assert client.post("/api/usuarios", json=payload, headers=admin_headers).status_code == 422


def test_cpf_duplicado_409(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    cpf = novo_cpf()
    _criar(client, admin_headers, cpf)
    response = client.post(
        "/api/usuarios", json={"nome": "Outro Nome", "cpf": cpf, "senha": "senha-456"}, headers=admin_headers
    )
    assert response.status_code == 409


def test_alterar_sem_senha_mantem_a_atual(
    client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]
) -> None:
    cpf = novo_cpf()
    criado = _criar(client, admin_headers, cpf)
    response = client.put(
        f"/api/usuarios/{criado['id']}",
        json={"nome": "Beatriz Rocha Lima", "cpf": cpf, "permissoes": ["view"]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["nome"] == "Beatriz Rocha Lima"
    assert client.post("/api/auth/login", json={"cpf": cpf, "senha": "senha-123"}).status_code == 200


def test_mudar_permissoes_encerra_sessoes_do_usuario(
    client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]
) -> None:
    cpf = novo_cpf()
    criado = _criar(client, admin_headers, cpf, permissoes=["view"])
    headers = _login(client, cpf)
    assert client.get("/api/auth/me", headers=headers).status_code == 200

    client.put(
        f"/api/usuarios/{criado['id']}",
        json={"nome": "Beatriz Rocha", "cpf": cpf, "permissoes": ["view", "create"]},
        headers=admin_headers,
    )
    assert client.get("/api/auth/me", headers=headers).status_code == 401

    novo = _login(client, cpf)
    assert client.get("/api/auth/me", headers=novo).json()["permissoes"] == ["create", "view"]


def test_excluir_encerra_sessoes(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    cpf = novo_cpf()
    criado = _criar(client, admin_headers, cpf)
    headers = _login(client, cpf)
    assert client.delete(f"/api/usuarios/{criado['id']}", headers=admin_headers).status_code == 204
    assert client.get("/api/auth/me", headers=headers).status_code == 401
    assert client.post("/api/auth/login", json={"cpf": cpf, "senha": "senha-123"}).status_code == 401


def test_pesquisa_por_cpf_parcial(client: TestClient, admin_headers: dict[str, str], novo_cpf: Callable[[], str]) -> None:
    cpf = novo_cpf()
    criado = _criar(client, admin_headers, cpf, nome="Fernanda Unica")
    response = client.get("/api/usuarios", params={"termo": cpf}, headers=admin_headers)
    assert [u["id"] for u in response.json()] == [criado["id"]]


def test_sem_all_nao_cria_administrador(
    client: TestClient,
    login_com_permissoes: Callable[..., dict[str, str]],
    novo_cpf: Callable[[], str],
) -> None:
    headers = login_com_permissoes("view", "create", "edit", "delete")
    payload = {
        "nome": "Admin Indevido",
        "cpf": novo_cpf(),
        "senha": "senha-123",
        "is_admin": True,
        "permissoes": ["all"],
    }
    assert client.post("/api/usuarios", json=payload, headers=headers).status_code == 403
    assert client.get("/api/usuarios", headers=headers).status_code == 403


def test_sem_all_nao_altera_nem_exclui_usuario(
    client: TestClient,
    admin_headers: dict[str, str],
    login_com_permissoes: Callable[..., dict[str, str]],
    novo_cpf: Callable[[], str],
) -> None:
    cpf = novo_cpf()
    criado = _criar(client, admin_headers, cpf)
    headers = login_com_permissoes("view", "edit", "delete")
    promover = {"nome": "Beatriz Rocha", "cpf": cpf, "is_admin": True, "permissoes": ["all"]}
    assert client.put(f"/api/usuarios/{criado['id']}", json=promover, headers=headers).status_code == 403
    assert client.delete(f"/api/usuarios/{criado['id']}", headers=headers).status_code == 403
    assert client.get(f"/api/usuarios/{criado['id']}", headers=admin_headers).json()["is_admin"] is False


def test_permissao_all_gerencia_usuarios(
    client: TestClient,
    login_com_permissoes: Callable[..., dict[str, str]],
    novo_cpf: Callable[[], str],
) -> None:
    headers = login_com_permissoes("all")
    criado = _criar(client, headers, novo_cpf())
    assert client.get(f"/api/usuarios/{criado['id']}", headers=headers).status_code == 200
