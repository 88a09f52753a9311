from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID


class CompanyBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    description: str = Field(..., min_length=3, max_length=5000)
    location: str = Field(..., min_length=2, max_length=255)
    contact: str = Field(..., min_length=5, max_length=255)


class CompanyCreate(CompanyBase):

    @field_validator('name', 'location', 'contact')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()


class CompanyUpdate(BaseModel):
    """Partial update: only the fields sent are applied."""
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    description: Optional[str] = Field(None, min_length=3, max_length=5000)
    location: Optional[str] = Field(None, min_length=2, max_length=255)
    contact: Optional[str] = Field(None, min_length=5, max_length=255)

    @field_validator('name', 'description', 'location', 'contact', mode='before')
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class Company(CompanyBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CompanyJob(BaseModel):
    """Job as listed on its company's page."""
    id: UUID
    title: str
    description: str
    experience: str

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(Company):
    jobs: List[CompanyJob] = Field(default_factory=list)
