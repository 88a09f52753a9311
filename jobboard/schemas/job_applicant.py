from uuid import UUID

from pydantic import BaseModel, Field


class JobApplicantRequest(BaseModel):
    job_id: UUID = Field(..., description="ID of the job being applied to")
    applicant_id: UUID = Field(..., description="ID of the applying applicant")


class JobApplicantResponse(BaseModel):
    message: str
    job_id: UUID
    applicant_id: UUID
