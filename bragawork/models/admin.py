"""
BragaWork - Admin User Model
Usuários com acesso ao painel administrativo
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, func, true

from bragawork.database import Base


class AdminUser(Base):
    """Modelo de usuário admin"""
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)

    is_active = Column(Boolean, server_default=true())
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())

    @staticmethod
    def public_dict(row: dict) -> dict:
        """Dados seguros para devolver ao cliente (sem hash)"""
        return {
            "id": row["id"],
            "username": row["username"],
            "fullName": row["full_name"],
            "email": row["email"],
        }
