"""
BragaWork - Database Backends
Interface única de consultas sobre PostgreSQL, MySQL e SQLite.

Os chamadores escrevem SQL com parâmetros nomeados (``:nome``) e recebem
sempre um ``QueryResult``; cada backend usa o binding nativo do seu driver
e sabe como obter o id da última linha inserida.
"""
import logging
import re
import ssl
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import MetaData, inspect, text
from sqlalchemy.engine import CursorResult, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

RETURNING_RE = re.compile(r"\s+RETURNING\s+\w+\s*;?\s*$", re.IGNORECASE)


@dataclass
class QueryResult:
    """Resultado normalizado de uma consulta"""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    last_insert_id: Optional[int] = None


def strip_returning(sql: str) -> str:
    return RETURNING_RE.sub("", sql).strip()


class Database(ABC):
    """Contrato comum de acesso ao banco"""

    name = "generic"
    # SQLite não aceita ALTER TABLE ... ADD CONSTRAINT
    supports_add_constraint = True

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, pool_pre_ping=True, **engine_kwargs)

    async def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> QueryResult:
        """Executa uma instrução em transação própria"""
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), params or {})
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings().all()]
                return QueryResult(
                    rows=rows,
                    rowcount=len(rows),
                    last_insert_id=self._returned_id(rows)
                )
            return QueryResult(
                rowcount=result.rowcount,
                last_insert_id=self._cursor_id(result)
            )

    async def insert_and_get_id(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[int]:
        """Executa um INSERT e devolve o id gerado"""
        result = await self.execute(self.prepare_insert(sql), params)
        return result.last_insert_id

    @abstractmethod
    def prepare_insert(self, sql: str) -> str:
        """Ajusta o INSERT para que o id gerado possa ser lido"""

    def _returned_id(self, rows: List[Dict[str, Any]]) -> Optional[int]:
        if rows and "id" in rows[0]:
            return rows[0]["id"]
        return None

    def _cursor_id(self, result: CursorResult) -> Optional[int]:
        return None

    async def create_schema(self, metadata: MetaData) -> None:
        """Cria as tabelas que ainda não existem"""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def get_columns(self, table: str) -> List[str]:
        async with self.engine.connect() as conn:
            return await conn.run_sync(
                lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns(table)]
            )

    async def migrate_legacy_projects(self) -> bool:
        """
        Tabelas de projetos antigas não têm a coluna status.
        Adiciona a coluna e deriva o valor de is_active.
        Retorna True se a migração foi aplicada.
        """
        columns = await self.get_columns("projects")
        if not columns or "status" in columns:
            return False

        logger.info("Migrando tabela projects: adicionando coluna status")
        async with self.engine.begin() as conn:
            await conn.execute(text(
                "ALTER TABLE projects ADD COLUMN status VARCHAR(20) DEFAULT 'aprovado'"
            ))
            if self.supports_add_constraint:
                await conn.execute(text(
                    "ALTER TABLE projects ADD CONSTRAINT chk_project_status "
                    "CHECK (status IN ('pendente', 'aprovado', 'cancelado'))"
                ))
            await conn.execute(text(
                "UPDATE projects SET status = CASE WHEN is_active THEN 'aprovado' ELSE 'cancelado' END"
            ))
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


class PostgresDatabase(Database):
    """PostgreSQL via asyncpg; ids lidos de RETURNING id"""

    name = "postgres"

    def prepare_insert(self, sql: str) -> str:
        if RETURNING_RE.search(sql):
            return sql
        return sql.rstrip().rstrip(";") + " RETURNING id"


class MySQLDatabase(Database):
    """MySQL via aiomysql; sem RETURNING, usa lastrowid"""

    name = "mysql"

    def prepare_insert(self, sql: str) -> str:
        return strip_returning(sql)

    def _cursor_id(self, result: CursorResult) -> Optional[int]:
        return result.lastrowid or None


class SQLiteDatabase(MySQLDatabase):
    """SQLite via aiosqlite, para desenvolvimento local e testes"""

    name = "sqlite"
    supports_add_constraint = False


def create_database(url: str, pool_size: int = 10, production: bool = False) -> Database:
    """Escolhe o backend pela URL"""
    backend = make_url(url).get_backend_name()

    if backend == "postgresql":
        connect_args = {}
        if production:
            # Certificados de provedores gerenciados não são verificados
            ctx = ssl.create_default_context()
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE
            connect_args["ssl"] = ctx
        logger.info("Configurado para usar PostgreSQL")
        return PostgresDatabase(url, pool_size=pool_size, connect_args=connect_args)

    if backend == "mysql":
        logger.info("Configurado para usar MySQL")
        return MySQLDatabase(url, pool_size=pool_size)

    if backend == "sqlite":
        logger.info("Configurado para usar SQLite (%s)", url)
        return SQLiteDatabase(url)

    raise ValueError(f"Banco de dados não suportado: {backend}")
