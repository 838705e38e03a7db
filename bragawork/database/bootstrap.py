"""
BragaWork - Database Bootstrap
Criação das tabelas, migração legada e dados iniciais
"""
import logging

from bragawork.core.config import settings
from bragawork.core.security import get_password_hash
from bragawork.database.backends import Database
from bragawork.database.session import Base
from bragawork.models.project import MediaType, ProjectStatus

logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "Site Corporativo Moderno",
        "description": "Website empresarial desenvolvido com tecnologias avançadas, design responsivo e otimizado para conversões.",
        "media_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=400&q=80",
        "display_order": 1,
    },
    {
        "title": "E-commerce Completo",
        "description": "Loja virtual robusta com carrinho de compras, sistema de pagamento integrado e painel administrativo.",
        "media_url": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=400&q=80",
        "display_order": 2,
    },
    {
        "title": "Portal de Notícias",
        "description": "Portal dinâmico com sistema de gestão de conteúdo e newsletter automática.",
        "media_url": "https://images.unsplash.com/photo-1504711434969-e33886168f5c?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=400&q=80",
        "display_order": 3,
    },
]


async def seed_admin(db: Database) -> bool:
    """Cria o admin padrão se ainda não existir"""
    result = await db.execute(
        "SELECT id FROM admin_users WHERE username = :username",
        {"username": settings.ADMIN_USERNAME}
    )
    if result.rows:
        return False

    await db.execute(
        """INSERT INTO admin_users (username, password_hash, full_name, email)
           VALUES (:username, :password_hash, :full_name, :email)""",
        {
            "username": settings.ADMIN_USERNAME,
            "password_hash": get_password_hash(settings.ADMIN_PASSWORD),
            "full_name": settings.ADMIN_FULL_NAME,
            "email": settings.ADMIN_EMAIL,
        }
    )
    logger.info(f"Usuário admin padrão criado (usuário: {settings.ADMIN_USERNAME})")
    return True


async def seed_projects(db: Database) -> bool:
    """Cria projetos de exemplo se a tabela estiver vazia"""
    result = await db.execute("SELECT COUNT(*) AS count FROM projects")
    if int(result.rows[0]["count"]) > 0:
        return False

    for project in SAMPLE_PROJECTS:
        await db.execute(
            """INSERT INTO projects (title, description, media_url, media_type, display_order, status, is_active)
               VALUES (:title, :description, :media_url, :media_type, :display_order, :status, :is_active)""",
            {
                **project,
                "media_type": MediaType.IMAGE.value,
                "status": ProjectStatus.APROVADO.value,
                "is_active": True,
            }
        )
    logger.info("Projetos de exemplo criados")
    return True


async def init_db(db: Database) -> bool:
    """
    Inicializa o banco. Falhas são registradas e não derrubam o processo:
    o servidor continua no ar, degradado.
    """
    from bragawork import models  # noqa: F401 - registra as tabelas no metadata

    try:
        await db.create_schema(Base.metadata)
        await db.migrate_legacy_projects()
        await seed_admin(db)
        await seed_projects(db)
    except Exception:
        logger.exception("Erro ao inicializar banco de dados")
        return False

    logger.info("Banco de dados inicializado com sucesso!")
    return True
