"""
BragaWork - API Client
Fachada de acesso à API para ferramentas e integrações.

Anexa o token Bearer em todas as chamadas (exceto login e envio de
orçamento). Qualquer resposta 401 limpa o token salvo e força logout.
Erros de rede viram um envelope ``{"success": False, "message": ...}``.
"""
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import httpx

logger = logging.getLogger(__name__)

PUBLIC_ENDPOINTS = ("login", "submit-quote")
SESSION_EXPIRED_MESSAGE = "Sessão expirada. Faça login novamente."

IMAGE_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


class TokenStore:
    """Guarda o token em memória ou em arquivo"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._token: Optional[str] = None
        if self.path and self.path.exists():
            self._token = self.path.read_text().strip() or None

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token
        if self.path:
            self.path.write_text(token)

    def clear(self) -> None:
        self._token = None
        if self.path and self.path.exists():
            self.path.unlink()


class PortalClient:
    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        http: Optional[httpx.Client] = None,
        token_store: Optional[TokenStore] = None,
        on_logout: Optional[Callable[[], None]] = None,
        timeout: float = 10.0
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.tokens = token_store or TokenStore()
        self.on_logout = on_logout

    @property
    def token(self) -> Optional[str]:
        return self.tokens.get()

    def _force_logout(self):
        self.tokens.clear()
        if self.on_logout:
            self.on_logout()

    def _request(self, method: str, endpoint: str, **kwargs):
        headers = kwargs.pop("headers", {})
        token = self.tokens.get()
        if token and not endpoint.startswith(PUBLIC_ENDPOINTS):
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self.http.request(method, f"/api/{endpoint}", headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Erro na requisição para {endpoint}: {e}")
            return {"success": False, "message": str(e) or "Erro de conexão."}

        if response.status_code == 401:
            self._force_logout()
            return {"success": False, "message": SESSION_EXPIRED_MESSAGE}

        if response.is_error:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            return {
                "success": False,
                "message": message or f"Erro no servidor: {response.status_code}"
            }

        return response.json()

    def submit_quote(self, data: dict):
        return self._request("POST", "submit-quote", json=data)

    def login(self, username: str, password: str):
        result = self._request("POST", "login", json={"username": username, "password": password})
        if result.get("success") and result.get("token"):
            self.tokens.set(result["token"])
        return result

    def logout(self):
        """Encerra a sessão no servidor e descarta o token local"""
        result = {"success": True}
        if self.tokens.get():
            result = self._request("POST", "logout")
        self.tokens.clear()
        return result

    def get_quotes(self):
        return self._request("GET", "get-quotes")

    def update_quote_status(self, quote_id: int, status: str, admin_notes: Optional[str] = None):
        payload = {"id": quote_id, "status": status}
        if admin_notes:
            payload["adminNotes"] = admin_notes
        return self._request("POST", "update-quote", json=payload)

    def delete_quote(self, quote_id: int):
        return self._request("POST", "delete-quote", json={"id": quote_id})

    def get_projects(self, admin: bool = False):
        endpoint = "get-projects?admin=true" if admin else "get-projects"
        return self._request("GET", endpoint)

    def save_project(self, project: dict):
        return self._request("POST", "save-project", json=project)

    def delete_project(self, project_id: int):
        return self._request("POST", "delete-project", json={"id": project_id})

    def upload_image(self, file: Union[str, Path], content_type: Optional[str] = None):
        path = Path(file)
        if content_type is None:
            content_type = IMAGE_CONTENT_TYPES.get(path.suffix.lower(), "application/octet-stream")
        with path.open("rb") as fh:
            return self._request("POST", "upload-image", files={"image": (path.name, fh, content_type)})

    def list_images(self):
        return self._request("GET", "list-images")

    def close(self):
        self.http.close()
