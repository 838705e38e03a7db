"""
BragaWork - Auth API
Login, logout e dependency de autenticação dos administradores
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from slowapi import Limiter
from slowapi.util import get_remote_address

from bragawork.database import Database, get_db
from bragawork.models import AdminUser
from bragawork.schemas import LoginRequest
from bragawork.core import (
    Session,
    Unauthorized,
    session_store,
    verify_password,
    settings
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])
security = HTTPBearer(auto_error=False)

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_current_admin(token: Optional[str] = Depends(get_bearer_token)) -> Session:
    """Dependency para rotas protegidas; levanta Unauthorized (401)"""
    return session_store.validate(token)


async def get_optional_admin(token: Optional[str] = Depends(get_bearer_token)) -> Optional[Session]:
    """Sessão quando há token válido; rotas públicas não falham por token velho"""
    if not token:
        return None
    try:
        return session_store.validate(token)
    except Unauthorized:
        return None


@router.post("/login")
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(request: Request, payload: LoginRequest, db: Database = Depends(get_db)):
    """Login de administrador"""
    try:
        if not payload.username or not payload.password:
            return {"success": False, "message": "Usuário e senha são obrigatórios."}

        result = await db.execute(
            "SELECT * FROM admin_users WHERE username = :username AND is_active = :active",
            {"username": payload.username, "active": True}
        )
        if not result.rows:
            logger.info(f"Login recusado para usuário desconhecido/inativo: {payload.username}")
            return {"success": False, "message": "Usuário ou senha incorretos."}

        user = result.rows[0]
        if not verify_password(payload.password, user["password_hash"]):
            logger.info(f"Senha incorreta para {payload.username}")
            return {"success": False, "message": "Usuário ou senha incorretos."}

        # Atualiza último login
        await db.execute(
            "UPDATE admin_users SET last_login = CURRENT_TIMESTAMP WHERE id = :id",
            {"id": user["id"]}
        )

        token = session_store.create_session(user["id"], user["username"])
        logger.info(f"Admin {user['username']} autenticado")

        return {
            "success": True,
            "message": "Login realizado com sucesso!",
            "token": token,
            "user": AdminUser.public_dict(user)
        }
    except Exception as e:
        logger.error(f"Erro no login: {e}")
        return {"success": False, "message": "Erro ao realizar login."}


@router.post("/logout")
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    admin: Session = Depends(get_current_admin)
):
    """Encerra a sessão do token enviado"""
    session_store.invalidate(token)
    return {"success": True, "message": "Sessão encerrada."}


@router.get("/me")
async def get_me(admin: Session = Depends(get_current_admin), db: Database = Depends(get_db)):
    """Retorna dados do admin atual"""
    try:
        result = await db.execute(
            "SELECT id, username, full_name, email FROM admin_users WHERE id = :id",
            {"id": admin.user_id}
        )
        if not result.rows:
            raise Unauthorized()
        return {"success": True, "user": AdminUser.public_dict(result.rows[0])}
    except Unauthorized:
        raise
    except Exception as e:
        logger.error(f"Erro ao buscar admin: {e}")
        return {"success": False, "message": "Erro ao buscar usuário."}
