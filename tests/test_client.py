import httpx
import pytest
from fastapi.testclient import TestClient

from bragawork import admin_cli
from bragawork.client import PortalClient, TokenStore
from bragawork.core import session_store

QUOTE = {
    "firstName": "João",
    "lastName": "Lima",
    "email": "joao@example.com",
    "phone": "11999990000",
    "projectDescription": "Loja virtual",
}


@pytest.fixture
def logouts() -> list:
    return []


@pytest.fixture
def portal(client: TestClient, logouts) -> PortalClient:
    return PortalClient(http=client, on_logout=lambda: logouts.append(True))


def test_login_stores_token(portal: PortalClient):
    result = portal.login("admin", "admin123")
    assert result["success"] is True
    assert portal.token == result["token"]


def test_failed_login_keeps_no_token(portal: PortalClient):
    result = portal.login("admin", "errada")
    assert result["success"] is False
    assert portal.token is None


def test_public_calls_do_not_need_token(portal: PortalClient):
    assert portal.submit_quote(QUOTE)["success"] is True
    assert len(portal.get_projects()) == 3


def test_admin_flow(portal: PortalClient, tmp_path):
    portal.login("admin", "admin123")
    quote_id = portal.submit_quote(QUOTE)["quoteId"]

    assert portal.update_quote_status(quote_id, "in_progress", "Retornar")["success"] is True
    quotes = portal.get_quotes()
    assert quotes[0]["status"] == "in_progress"
    assert quotes[0]["adminNotes"] == "Retornar"

    image = tmp_path / "capa.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\n")
    uploaded = portal.upload_image(image)
    assert uploaded["success"] is True

    saved = portal.save_project({"title": "Novo", "mediaUrl": uploaded["imageUrl"], "status": "aprovado"})
    assert saved["success"] is True
    assert any(p["mediaUrl"] == uploaded["imageUrl"] for p in portal.get_projects(admin=True))
    assert portal.list_images()["images"][0]["url"] == uploaded["imageUrl"]

    assert portal.delete_project(saved["projectId"])["success"] is True
    assert portal.delete_quote(quote_id)["success"] is True
    assert portal.get_quotes() == []


def test_401_forces_logout(portal: PortalClient, logouts):
    portal.login("admin", "admin123")
    session_store.clear()

    result = portal.get_quotes()
    assert result == {"success": False, "message": "Sessão expirada. Faça login novamente."}
    assert portal.token is None
    assert logouts == [True]


def test_logout_invalidates_server_session(portal: PortalClient):
    portal.login("admin", "admin123")
    token = portal.token

    assert portal.logout()["success"] is True
    assert portal.token is None
    assert token not in session_store


def test_network_error_becomes_envelope():
    def handler(request):
        raise httpx.ConnectError("conexão recusada", request=request)

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://bragawork.test")
    portal = PortalClient(http=http)

    result = portal.get_projects()
    assert result == {"success": False, "message": "conexão recusada"}


def test_server_error_message_is_surfaced():
    def handler(request):
        return httpx.Response(500, json={"message": "Falha interna"})

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://bragawork.test")
    result = PortalClient(http=http).get_projects()
    assert result == {"success": False, "message": "Falha interna"}


def test_bearer_header_only_on_protected_calls():
    seen = {}

    def handler(request):
        seen[request.url.path] = request.headers.get("Authorization")
        return httpx.Response(200, json={"success": True})

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://bragawork.test")
    store = TokenStore()
    store.set("abc")
    portal = PortalClient(http=http, token_store=store)

    portal.submit_quote(QUOTE)
    portal.get_quotes()

    assert seen["/api/submit-quote"] is None
    assert seen["/api/get-quotes"] == "Bearer abc"


def test_token_store_file(tmp_path):
    path = tmp_path / ".admin_token"
    TokenStore(path).set("token123")
    assert TokenStore(path).get() == "token123"

    store = TokenStore(path)
    store.clear()
    assert not path.exists()
    assert store.get() is None


def test_cli_lists_quotes(portal: PortalClient, capsys):
    portal.submit_quote(QUOTE)

    assert admin_cli.main(["login", "admin", "admin123"], client=portal) == 0
    assert admin_cli.main(["quotes", "list"], client=portal) == 0
    out = capsys.readouterr().out
    assert "João Lima" in out
    assert "Total: 1 solicitações" in out


def test_cli_reports_errors(portal: PortalClient, capsys):
    assert admin_cli.main(["quotes", "list"], client=portal) == 1
    assert "Sessão expirada" in capsys.readouterr().out
    assert admin_cli.main(["desconhecido"], client=portal) == 2
