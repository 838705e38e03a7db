"""
BragaWork - Quote Schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class QuoteSubmitRequest(BaseModel):
    first_name: Optional[str] = Field(None, alias="firstName", max_length=50)
    last_name: Optional[str] = Field(None, alias="lastName", max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    country_code: Optional[str] = Field(None, alias="countryCode", max_length=10)
    project_description: Optional[str] = Field(None, alias="projectDescription")

    @field_validator('email', mode="before")
    @classmethod
    def blank_email_is_missing(cls, v):
        # E-mail em branco conta como campo obrigatório ausente
        if isinstance(v, str) and not v.strip():
            return None
        return v

    class Config:
        populate_by_name = True

    def missing_required(self) -> bool:
        return not all([
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
            self.project_description,
        ])


class QuoteUpdateRequest(BaseModel):
    id: Optional[int] = None
    status: Optional[str] = None
    admin_notes: Optional[str] = Field(None, alias="adminNotes")

    class Config:
        populate_by_name = True


class IdRequest(BaseModel):
    id: Optional[int] = None
