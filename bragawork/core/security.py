"""
BragaWork - Security
Hash de senhas e geração de tokens de sessão
"""
import secrets

import bcrypt

SESSION_TOKEN_BYTES = 32


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica password usando bcrypt"""
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str, rounds: int = 10) -> str:
    """Gera hash bcrypt do password"""
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt(rounds)
    ).decode('utf-8')


def generate_session_token() -> str:
    """Token opaco de 64 caracteres hexadecimais"""
    return secrets.token_hex(SESSION_TOKEN_BYTES)
