"""
BragaWork - Session Store
Registro em memória dos tokens de sessão dos administradores.

As sessões vivem apenas na memória do processo: reiniciar o servidor
desloga todos os administradores. Entradas expiradas são removidas
quando acessadas (não há varredura em segundo plano).
"""
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Dict, Optional

from .security import generate_session_token


class Unauthorized(Exception):
    """Token ausente, desconhecido ou expirado"""

    def __init__(self, message: str = "Não autorizado. Faça login primeiro."):
        super().__init__(message)
        self.message = message


@dataclass
class Session:
    user_id: int
    username: str
    expires_at: float


class SessionStore:
    """Mapa token -> sessão com expiração fixa"""

    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(self, user_id: int, username: str) -> str:
        token = generate_session_token()
        session = Session(
            user_id=user_id,
            username=username,
            expires_at=self._clock() + self.ttl.total_seconds()
        )
        with self._lock:
            self._sessions[token] = session
        return token

    def validate(self, token: Optional[str]) -> Session:
        """Retorna a sessão do token ou levanta Unauthorized"""
        if not token:
            raise Unauthorized()

        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                raise Unauthorized()

            if self._clock() > session.expires_at:
                del self._sessions[token]
                raise Unauthorized("Sessão expirada. Faça login novamente.")

        return session

    def invalidate(self, token: Optional[str]) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._sessions
