"""
BragaWork - Project Model
Projetos exibidos no carrossel do site
"""
import enum
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, CheckConstraint, func, true

from bragawork.database import Base
from bragawork.models.utils import isoformat


class ProjectStatus(str, enum.Enum):
    """Status de publicação do projeto"""
    PENDENTE = "pendente"
    APROVADO = "aprovado"
    CANCELADO = "cancelado"


class MediaType(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"


class Project(Base):
    """Modelo de projeto do portfólio"""
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint("media_type IN ('image', 'video')", name="chk_media_type"),
        CheckConstraint(
            "status IN ('pendente', 'aprovado', 'cancelado')",
            name="chk_project_status"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    media_url = Column(String(500), nullable=False)
    media_type = Column(String(10), server_default=MediaType.IMAGE.value)
    project_link = Column(String(500), nullable=True)

    # Publicação (is_active é legado, derivado do status)
    status = Column(String(20), server_default=ProjectStatus.PENDENTE.value)
    is_active = Column(Boolean, server_default=true())
    display_order = Column(Integer, server_default="0")
    views_count = Column(Integer, server_default="0")
    created_by = Column(Integer, nullable=True)

    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())

    @staticmethod
    def row_to_dict(row: dict) -> dict:
        return {
            "id": row["id"],
            "title": row["title"],
            "description": row["description"],
            "mediaUrl": row["media_url"],
            "mediaType": row["media_type"],
            "projectLink": row["project_link"],
            "status": row["status"] or ProjectStatus.PENDENTE.value,
            "isActive": bool(row["is_active"]),
            "displayOrder": row["display_order"],
            "viewsCount": row["views_count"],
            "createdAt": isoformat(row["created_at"]),
        }


def derive_status(status, is_active):
    """
    Deriva status/is_active um do outro quando só um foi enviado.
    Retorna (status, is_active).
    """
    if not status:
        if is_active is not None:
            status = ProjectStatus.APROVADO.value if is_active else ProjectStatus.CANCELADO.value
        else:
            status = ProjectStatus.PENDENTE.value

    if is_active is None:
        is_active = status == ProjectStatus.APROVADO.value

    return status, bool(is_active)
