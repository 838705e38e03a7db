"""
BragaWork - Database Session
"""
import logging
from sqlalchemy.orm import declarative_base

from bragawork.core.config import settings
from bragawork.database.backends import Database, create_database

logger = logging.getLogger(__name__)

# Backend escolhido pela configuração (um pool por processo)
database = create_database(
    settings.db_url,
    pool_size=settings.DB_POOL_SIZE,
    production=settings.is_production,
)

# Base para models
Base = declarative_base()


async def get_db() -> Database:
    """Dependency para injetar o acesso ao banco"""
    return database
