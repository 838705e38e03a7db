"""
BragaWork - Projects API
Carrossel público de projetos e gestão no painel
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from bragawork.database import Database, get_db
from bragawork.models import Project, ProjectStatus, MediaType, derive_status
from bragawork.schemas import ProjectSaveRequest, IdRequest
from bragawork.core import Session, Unauthorized
from bragawork.api.auth import get_current_admin, get_optional_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Projects"])

PLACEHOLDER_MEDIA_URL = "https://via.placeholder.com/600x400"
PROJECT_STATUSES = {s.value for s in ProjectStatus}
MEDIA_TYPES = {m.value for m in MediaType}


@router.get("/get-projects")
async def get_projects(
    admin_flag: Optional[str] = Query(None, alias="admin"),
    db: Database = Depends(get_db),
    admin: Optional[Session] = Depends(get_optional_admin)
):
    """Público: só aprovados. Com ?admin=true (autenticado): todos"""
    # Só o valor literal "true" ativa a visão do painel
    admin_view = admin_flag == "true"
    if admin_view and admin is None:
        raise Unauthorized()

    try:
        if admin_view:
            result = await db.execute(
                "SELECT * FROM projects ORDER BY display_order ASC, created_at DESC, id DESC"
            )
        else:
            result = await db.execute(
                """SELECT * FROM projects WHERE status = :status
                   ORDER BY display_order ASC, created_at DESC, id DESC""",
                {"status": ProjectStatus.APROVADO.value}
            )
        return [Project.row_to_dict(row) for row in result.rows]
    except Exception as e:
        logger.error(f"Erro ao buscar projetos: {e}")
        return []


@router.post("/save-project")
async def save_project(
    payload: ProjectSaveRequest,
    db: Database = Depends(get_db),
    admin: Session = Depends(get_current_admin)
):
    """Cria (sem id) ou atualiza (com id) um projeto"""
    try:
        if not payload.title:
            return {"success": False, "message": "Título é obrigatório."}

        if payload.status and payload.status not in PROJECT_STATUSES:
            return {"success": False, "message": "Status inválido."}

        if payload.media_type and payload.media_type not in MEDIA_TYPES:
            return {"success": False, "message": "Tipo de mídia inválido."}

        status, is_active = derive_status(payload.status, payload.is_active)

        if payload.id:
            # Campos de mídia e ordem não enviados mantêm o valor atual
            await db.execute(
                """UPDATE projects
                   SET title = :title, description = :description,
                       media_url = COALESCE(:media_url, media_url),
                       media_type = COALESCE(:media_type, media_type),
                       project_link = :project_link,
                       status = :status, is_active = :is_active,
                       display_order = COALESCE(:display_order, display_order),
                       updated_at = CURRENT_TIMESTAMP
                   WHERE id = :id""",
                {
                    "title": payload.title,
                    "description": payload.description,
                    "media_url": payload.media_url,
                    "media_type": payload.media_type,
                    "project_link": payload.project_link,
                    "status": status,
                    "is_active": is_active,
                    "display_order": payload.display_order,
                    "id": payload.id,
                }
            )
            project_id = payload.id
        else:
            project_id = await db.insert_and_get_id(
                """INSERT INTO projects
                       (title, description, media_url, media_type, project_link,
                        status, is_active, display_order, created_by)
                   VALUES (:title, :description, :media_url, :media_type, :project_link,
                           :status, :is_active, :display_order, :created_by)""",
                {
                    "title": payload.title,
                    "description": payload.description,
                    "media_url": payload.media_url or PLACEHOLDER_MEDIA_URL,
                    "media_type": payload.media_type or MediaType.IMAGE.value,
                    "project_link": payload.project_link,
                    "status": status,
                    "is_active": is_active,
                    "display_order": payload.display_order or 0,
                    "created_by": admin.user_id,
                }
            )

        return {"success": True, "message": "Projeto salvo com sucesso!", "projectId": project_id}
    except Exception as e:
        logger.error(f"Erro ao salvar projeto: {e}")
        return {"success": False, "message": "Erro ao salvar projeto."}


@router.post("/delete-project")
async def delete_project(
    payload: IdRequest,
    db: Database = Depends(get_db),
    admin: Session = Depends(get_current_admin)
):
    try:
        if not payload.id:
            return {"success": False, "message": "ID é obrigatório."}

        await db.execute("DELETE FROM projects WHERE id = :id", {"id": payload.id})

        return {"success": True, "message": "Projeto excluído com sucesso!"}
    except Exception as e:
        logger.error(f"Erro ao excluir projeto: {e}")
        return {"success": False, "message": "Erro ao excluir projeto."}
