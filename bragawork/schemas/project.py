"""
BragaWork - Project Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional


class ProjectSaveRequest(BaseModel):
    """Sem id cria, com id atualiza"""
    id: Optional[int] = None
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    media_url: Optional[str] = Field(None, alias="mediaUrl", max_length=500)
    media_type: Optional[str] = Field(None, alias="mediaType")
    project_link: Optional[str] = Field(None, alias="projectLink", max_length=500)
    status: Optional[str] = None
    is_active: Optional[bool] = Field(None, alias="isActive")
    display_order: Optional[int] = Field(None, alias="displayOrder")

    class Config:
        populate_by_name = True
