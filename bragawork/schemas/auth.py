"""
BragaWork - Auth Schemas
"""
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    # Campos opcionais: ausência vira envelope success=false, não 422
    username: Optional[str] = None
    password: Optional[str] = None
