import asyncio
import os
import shutil
import tempfile

import pytest

# Ambiente isolado: precisa estar definido antes de importar o app
_TMP_DIR = tempfile.mkdtemp(prefix="bragawork-tests-")
DB_PATH = os.path.join(_TMP_DIR, "test.db")
UPLOADS_DIR = os.path.join(_TMP_DIR, "uploads")

os.environ["DB_TYPE"] = "sqlite"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["UPLOADS_DIR"] = UPLOADS_DIR
os.environ["PUBLIC_DIR"] = os.path.join(_TMP_DIR, "public")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient  # noqa: E402

from bragawork.main import app  # noqa: E402
from bragawork.core import session_store  # noqa: E402
from bragawork.core import settings  # noqa: E402
from bragawork.database import create_database  # noqa: E402

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


def reset_state():
    if os.path.exists(DB_PATH):
        os.remove(DB_PATH)
    shutil.rmtree(os.path.join(UPLOADS_DIR, "projects"), ignore_errors=True)
    os.makedirs(os.path.join(UPLOADS_DIR, "projects"), exist_ok=True)
    session_store.clear()


@pytest.fixture
def client() -> TestClient:
    reset_state()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token(client: TestClient) -> str:
    response = client.post("/api/login", json=ADMIN_CREDENTIALS)
    data = response.json()
    assert data["success"] is True
    return data["token"]


@pytest.fixture
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def uploads_dir() -> str:
    return os.path.join(UPLOADS_DIR, "projects")


@pytest.fixture
def run_sql(client: TestClient):
    """Executa SQL direto no banco de teste, por fora da API"""
    def run(sql: str, params: dict = None) -> list:
        async def scenario():
            db = create_database(settings.db_url)
            try:
                return (await db.execute(sql, params)).rows
            finally:
                await db.dispose()
        return asyncio.run(scenario())
    return run
