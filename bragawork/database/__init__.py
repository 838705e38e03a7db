from .backends import (
    Database,
    QueryResult,
    PostgresDatabase,
    MySQLDatabase,
    SQLiteDatabase,
    create_database
)
from .session import Base, database, get_db
from .bootstrap import init_db

__all__ = [
    "Database",
    "QueryResult",
    "PostgresDatabase",
    "MySQLDatabase",
    "SQLiteDatabase",
    "create_database",
    "Base",
    "database",
    "get_db",
    "init_db"
]
