"""
BragaWork - Main Application
Site institucional com formulário de orçamento e painel administrativo
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging
import os

from bragawork import __version__
from bragawork.core import settings, Unauthorized
from bragawork.database import database, init_db
from bragawork.api import (
    auth_router,
    quotes_router,
    projects_router,
    uploads_router,
    limiter
)

if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)-8s - %(message)s'
    )

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do aplicativo"""
    logger.info(f"Starting {settings.APP_NAME} v{__version__} ({settings.ENVIRONMENT})")

    # Falha aqui não impede o servidor de subir
    await init_db(database)

    yield

    logger.info("Shutting down...")
    await database.dispose()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adiciona headers de seguranca em todas as respostas"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if request.url.path.endswith("/login"):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"
        return response


app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    description="BragaWork - site, orçamentos e painel administrativo",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Unauthorized)
async def unauthorized_handler(request: Request, exc: Unauthorized):
    return JSONResponse(status_code=401, content={"success": False, "message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Erros de validação seguem o envelope padrão (HTTP 200)
    logger.debug(f"Requisição inválida em {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=200, content={"success": False, "message": "Dados inválidos."})


app.include_router(auth_router, prefix="/api")
app.include_router(quotes_router, prefix="/api")
app.include_router(projects_router, prefix="/api")
app.include_router(uploads_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check"""
    return {"status": "healthy", "version": __version__}


# Uploads dos projetos em /uploads/projects/*
os.makedirs(os.path.join(settings.UPLOADS_DIR, "projects"), exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR), name="uploads")

# Site estático (index.html, admin.html, js, css)
if os.path.isdir(settings.PUBLIC_DIR):
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="site")
else:
    logger.warning(f"Diretório do site não encontrado: {settings.PUBLIC_DIR}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bragawork.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
