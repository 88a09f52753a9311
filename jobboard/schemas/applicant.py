from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class ApplicantBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    contact: str = Field(..., min_length=5, max_length=255)
    job_preferences: str = Field(..., min_length=3, max_length=5000)


class ApplicantCreate(ApplicantBase):

    @field_validator('name', 'contact', 'job_preferences')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()


class ApplicantUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=255)
    contact: Optional[str] = Field(None, min_length=5, max_length=255)
    job_preferences: Optional[str] = Field(None, min_length=3, max_length=5000)

    @field_validator('name', 'contact', 'job_preferences', mode='before')
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class ApplicantResponse(ApplicantBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicantSummary(BaseModel):
    """Applicant as listed under a job."""
    id: UUID
    name: str
    contact: str

    model_config = ConfigDict(from_attributes=True)
