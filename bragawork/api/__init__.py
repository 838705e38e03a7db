from .auth import router as auth_router, limiter
from .quotes import router as quotes_router
from .projects import router as projects_router
from .uploads import router as uploads_router

__all__ = [
    "auth_router",
    "quotes_router",
    "projects_router",
    "uploads_router",
    "limiter"
]
