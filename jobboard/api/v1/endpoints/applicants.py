from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.core.dependencies import get_applicant_service, get_application_service
from jobboard.schemas.applicant import ApplicantCreate, ApplicantResponse, ApplicantUpdate
from jobboard.schemas.common import MessageResponse
from jobboard.schemas.job import JobResponse
from jobboard.services.applicant_service import ApplicantService
from jobboard.services.application_service import ApplicationService

router = APIRouter()


@router.get("", response_model=List[ApplicantResponse])
async def list_applicants(
        applicant_service: ApplicantService = Depends(get_applicant_service),
) -> List[ApplicantResponse]:
    return await applicant_service.list_applicants()


@router.post("", response_model=ApplicantResponse, status_code=status.HTTP_201_CREATED)
async def create_applicant(
        applicant_data: ApplicantCreate,
        applicant_service: ApplicantService = Depends(get_applicant_service),
) -> ApplicantResponse:
    return await applicant_service.create_applicant(applicant_data)


@router.get("/{applicant_id}", response_model=ApplicantResponse)
async def get_applicant(
        applicant_id: UUID,
        applicant_service: ApplicantService = Depends(get_applicant_service),
) -> ApplicantResponse:
    return await applicant_service.get_applicant(applicant_id)


@router.put("/{applicant_id}", response_model=ApplicantResponse)
async def update_applicant(
        applicant_id: UUID,
        applicant_data: ApplicantUpdate,
        applicant_service: ApplicantService = Depends(get_applicant_service),
) -> ApplicantResponse:
    """Update the fields present in the body."""
    return await applicant_service.update_applicant(applicant_id, applicant_data)


@router.delete("/{applicant_id}", response_model=MessageResponse)
async def delete_applicant(
        applicant_id: UUID,
        applicant_service: ApplicantService = Depends(get_applicant_service),
) -> MessageResponse:
    await applicant_service.delete_applicant(applicant_id)
    return MessageResponse(message="Applicant deleted successfully", data={"id": str(applicant_id)})


@router.get("/{applicant_id}/jobs", response_model=List[JobResponse])
async def list_applicant_jobs(
        applicant_id: UUID,
        application_service: ApplicationService = Depends(get_application_service),
) -> List[JobResponse]:
    """Jobs the applicant applied for."""
    return await application_service.list_jobs_for_applicant(applicant_id)
