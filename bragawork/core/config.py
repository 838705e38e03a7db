"""
BragaWork - Configuration
"""
import logging
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

# Carrega .env com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)


class Settings(BaseSettings):
    # App
    APP_NAME: str = "BragaWork"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    # DB_TYPE: postgres (DATABASE_URL), mysql (DB_HOST/DB_USER/...) ou sqlite
    DB_TYPE: str = "postgres"
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_POOL_SIZE: int = 10
    LOCAL_DATABASE_URL: str = "sqlite+aiosqlite:///./bragawork.db"

    # Sessions
    SESSION_TTL_HOURS: int = 24

    # Admin padrão (criado na inicialização se não existir)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_FULL_NAME: str = "Administrador BragaWork"
    ADMIN_EMAIL: str = "admin@bragawork.com"

    # Arquivos
    PUBLIC_DIR: str = "public"
    UPLOADS_DIR: str = "public/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Rate limit do login
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def db_url(self) -> str:
        """Monta a URL SQLAlchemy de acordo com DB_TYPE"""
        db_type = self.DB_TYPE.lower()

        if db_type == "mysql":
            if not (self.DB_HOST and self.DB_USER and self.DB_PASSWORD and self.DB_NAME):
                raise ValueError("Configure as variáveis: DB_HOST, DB_USER, DB_PASSWORD, DB_NAME")
            return URL.create(
                "mysql+aiomysql",
                username=self.DB_USER,
                password=self.DB_PASSWORD,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            ).render_as_string(hide_password=False)

        if db_type == "sqlite":
            if self.DATABASE_URL and self.DATABASE_URL.startswith("sqlite"):
                return self.DATABASE_URL
            return self.LOCAL_DATABASE_URL

        if not self.DATABASE_URL:
            logger.warning("DATABASE_URL não configurada, usando banco local %s", self.LOCAL_DATABASE_URL)
            logger.warning("Para MySQL, defina DB_TYPE=mysql e as credenciais DB_HOST, DB_USER, DB_PASSWORD, DB_NAME")
            return self.LOCAL_DATABASE_URL

        url = self.DATABASE_URL
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix):]
        return url

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
