from .admin import AdminUser
from .quote import QuoteRequest, QuoteStatus
from .project import Project, ProjectStatus, MediaType, derive_status

__all__ = [
    "AdminUser",
    "QuoteRequest",
    "QuoteStatus",
    "Project",
    "ProjectStatus",
    "MediaType",
    "derive_status"
]
