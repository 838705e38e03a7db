from .auth import LoginRequest
from .quote import QuoteSubmitRequest, QuoteUpdateRequest, IdRequest
from .project import ProjectSaveRequest

__all__ = [
    "LoginRequest",
    "QuoteSubmitRequest",
    "QuoteUpdateRequest",
    "IdRequest",
    "ProjectSaveRequest"
]
