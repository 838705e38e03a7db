"""
BragaWork - Quote Request Model
Solicitações de orçamento enviadas pelo formulário público
"""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func

from bragawork.database import Base
from bragawork.models.utils import isoformat


class QuoteStatus(str, enum.Enum):
    """Status da solicitação"""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    REJECTED = "rejected"


class QuoteRequest(Base):
    """Modelo de solicitação de orçamento"""
    __tablename__ = "quote_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'completed', 'rejected')",
            name="chk_quote_status"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Contato
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    country_code = Column(String(10), nullable=False)
    phone = Column(String(20), nullable=False)
    project_description = Column(Text, nullable=False)

    # Triagem
    status = Column(String(20), server_default=QuoteStatus.PENDING.value)
    admin_notes = Column(Text, nullable=True)
    assigned_to = Column(Integer, nullable=True)

    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())

    @staticmethod
    def row_to_dict(row: dict) -> dict:
        return {
            "id": row["id"],
            "firstName": row["first_name"],
            "lastName": row["last_name"],
            "email": row["email"],
            "countryCode": row["country_code"],
            "phone": row["phone"],
            "projectDescription": row["project_description"],
            "status": row["status"],
            "adminNotes": row["admin_notes"],
            "assignedTo": row["assigned_to"],
            "createdAt": isoformat(row["created_at"]),
            "updatedAt": isoformat(row["updated_at"]),
        }
