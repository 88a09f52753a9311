from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from jobboard.schemas.applicant import ApplicantSummary


class JobBase(BaseModel):
    title: str = Field(..., min_length=2, max_length=255)
    description: str = Field(..., min_length=3, max_length=10000)
    required_skills: str = Field(..., min_length=1, max_length=5000)
    experience: str = Field(..., min_length=1, max_length=255)


class JobCreate(JobBase):
    company_id: UUID = Field(..., description="Company offering the job")

    @field_validator('title', 'experience')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()


class JobUpdate(BaseModel):
    """Partial update: only the fields sent are applied."""
    title: Optional[str] = Field(None, min_length=2, max_length=255)
    description: Optional[str] = Field(None, min_length=3, max_length=10000)
    required_skills: Optional[str] = Field(None, min_length=1, max_length=5000)
    experience: Optional[str] = Field(None, min_length=1, max_length=255)
    company_id: Optional[UUID] = None

    @field_validator('title', 'description', 'required_skills', 'experience', mode='before')
    @classmethod
    def strip_text(cls, v):
        # A whitespace-only value strips to "" and fails the length check
        if isinstance(v, str):
            return v.strip()
        return v


class JobResponse(JobBase):
    id: UUID
    company_id: UUID
    company_name: str
    location: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobSearchFilters(BaseModel):
    """Optional filters for job search; each is a case-insensitive substring match."""
    title: Optional[str] = None
    company_name: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[str] = None

    @field_validator('title', 'company_name', 'location', 'experience', mode='before')
    @classmethod
    def blank_as_absent(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def active_filters(self) -> dict:
        return self.model_dump(exclude_none=True)


class JobWithApplicants(BaseModel):
    id: UUID
    title: str
    description: str
    experience: str
    applicants: List[ApplicantSummary] = Field(default_factory=list)
