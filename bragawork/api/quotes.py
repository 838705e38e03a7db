"""
BragaWork - Quotes API
Envio público de solicitações de orçamento e triagem no painel
"""
import logging
from fastapi import APIRouter, Depends

from bragawork.database import Database, get_db
from bragawork.models import QuoteRequest, QuoteStatus
from bragawork.schemas import QuoteSubmitRequest, QuoteUpdateRequest, IdRequest
from bragawork.core import Session
from bragawork.api.auth import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quotes"])

DEFAULT_COUNTRY_CODE = "+55"
QUOTE_STATUSES = {s.value for s in QuoteStatus}


@router.post("/submit-quote")
async def submit_quote(payload: QuoteSubmitRequest, db: Database = Depends(get_db)):
    """Formulário público de orçamento"""
    try:
        if payload.missing_required():
            return {"success": False, "message": "Todos os campos são obrigatórios."}

        quote_id = await db.insert_and_get_id(
            """INSERT INTO quote_requests
                   (first_name, last_name, email, country_code, phone, project_description, status)
               VALUES (:first_name, :last_name, :email, :country_code, :phone, :project_description, :status)
               RETURNING id""",
            {
                "first_name": payload.first_name,
                "last_name": payload.last_name,
                "email": payload.email,
                "country_code": payload.country_code or DEFAULT_COUNTRY_CODE,
                "phone": payload.phone,
                "project_description": payload.project_description,
                "status": QuoteStatus.PENDING.value,
            }
        )
        logger.info(f"Nova solicitação de orçamento #{quote_id}")

        return {
            "success": True,
            "message": "Solicitação enviada com sucesso! Entraremos em contato em breve.",
            "quoteId": quote_id
        }
    except Exception as e:
        logger.error(f"Erro ao enviar solicitação: {e}")
        return {"success": False, "message": "Erro ao enviar solicitação. Tente novamente."}


@router.get("/get-quotes")
async def get_quotes(db: Database = Depends(get_db), admin: Session = Depends(get_current_admin)):
    """Pendentes primeiro, depois em andamento, depois o resto; mais novas primeiro"""
    try:
        result = await db.execute("""
            SELECT * FROM quote_requests
            ORDER BY
                CASE WHEN status = 'pending' THEN 1
                     WHEN status = 'in_progress' THEN 2
                     ELSE 3 END,
                created_at DESC,
                id DESC
        """)
        return [QuoteRequest.row_to_dict(row) for row in result.rows]
    except Exception as e:
        logger.error(f"Erro ao buscar solicitações: {e}")
        return []


@router.post("/update-quote")
async def update_quote(
    payload: QuoteUpdateRequest,
    db: Database = Depends(get_db),
    admin: Session = Depends(get_current_admin)
):
    """Atualiza status e, se enviadas, as notas do admin"""
    try:
        if not payload.id or not payload.status:
            return {"success": False, "message": "ID e status são obrigatórios."}

        if payload.status not in QUOTE_STATUSES:
            return {"success": False, "message": "Status inválido."}

        params = {"status": payload.status, "id": payload.id}
        if payload.admin_notes:
            query = """UPDATE quote_requests
                       SET status = :status, admin_notes = :admin_notes, updated_at = CURRENT_TIMESTAMP
                       WHERE id = :id"""
            params["admin_notes"] = payload.admin_notes
        else:
            query = """UPDATE quote_requests
                       SET status = :status, updated_at = CURRENT_TIMESTAMP
                       WHERE id = :id"""

        await db.execute(query, params)

        return {"success": True, "message": "Solicitação atualizada com sucesso!"}
    except Exception as e:
        logger.error(f"Erro ao atualizar solicitação: {e}")
        return {"success": False, "message": "Erro ao atualizar solicitação."}


@router.post("/delete-quote")
async def delete_quote(
    payload: IdRequest,
    db: Database = Depends(get_db),
    admin: Session = Depends(get_current_admin)
):
    try:
        if not payload.id:
            return {"success": False, "message": "ID é obrigatório."}

        await db.execute("DELETE FROM quote_requests WHERE id = :id", {"id": payload.id})

        return {"success": True, "message": "Solicitação excluída com sucesso!"}
    except Exception as e:
        logger.error(f"Erro ao excluir solicitação: {e}")
        return {"success": False, "message": "Erro ao excluir solicitação."}
