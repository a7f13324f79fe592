# tests/integration/test_api_relatorio.py
import importlib.util

from fastapi.testclient import TestClient

_PDF_DISPONIVEL = importlib.util.find_spec("weasyprint") is not None


def _seed(client: TestClient, headers: dict[str, str]) -> None:
    client.post(
        "/api/modalidades",
        json={"descricao": "Concorrencia Publica", "observacoes": "Lei 14.133"},
        headers=headers,
    )


def test_relatorio_json(client: TestClient, admin_headers: dict[str, str]) -> None:
    _seed(client, admin_headers)
    response = client.get("/api/modalidades/relatorio?formato=json", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    descricoes = [m["descricao"] for m in response.json()]
    assert "Concorrencia Publica" in descricoes


def test_relatorio_csv(client: TestClient, admin_headers: dict[str, str]) -> None:
    _seed(client, admin_headers)
    response = client.get("/api/modalidades/relatorio?formato=csv", headers=admin_headers)
    assert response.status_code == 200
    assert "text/csv" in response.headers["content-type"]
    assert "attachment; filename=modalidades.csv" in response.headers["content-disposition"]
    assert "Descricao,Observacoes" in response.text
    assert "Concorrencia Publica" in response.text


def test_relatorio_filtrado_por_termo(client: TestClient, admin_headers: dict[str, str]) -> None:
    _seed(client, admin_headers)
    response = client.get(
        "/api/modalidades/relatorio", params={"formato": "json", "termo": "inexistente-xyz"}, headers=admin_headers
    )
    assert response.json() == []


def test_relatorio_pdf(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/api/modalidades/relatorio?formato=pdf", headers=admin_headers)
    if _PDF_DISPONIVEL:
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
    else:
        assert response.status_code == 501


def test_relatorio_formato_invalido_422(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/api/modalidades/relatorio?formato=xml", headers=admin_headers)
    assert response.status_code == 422


def test_relatorio_exige_sessao(client: TestClient) -> None:
    assert client.get("/api/entidades/relatorio?formato=csv").status_code == 401
