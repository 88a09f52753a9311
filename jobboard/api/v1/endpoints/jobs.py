from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from jobboard.core.dependencies import get_application_service, get_job_service
from jobboard.schemas.applicant import ApplicantResponse
from jobboard.schemas.common import MessageResponse
from jobboard.schemas.job import JobCreate, JobResponse, JobSearchFilters, JobUpdate
from jobboard.services.application_service import ApplicationService
from jobboard.services.job_service import JobService

router = APIRouter()


@router.get("", response_model=List[JobResponse])
async def search_jobs(
        title: Optional[str] = Query(None, description="Substring of the job title"),
        company: Optional[str] = Query(None, description="Substring of the company name"),
        location: Optional[str] = Query(None, description="Substring of the company location"),
        experience: Optional[str] = Query(None, description="Substring of the required experience"),
        job_service: JobService = Depends(get_job_service),
) -> List[JobResponse]:
    """
    Search jobs

    Every filter is optional and case-insensitive; the filters that are given
    must all match. Results are ordered by title.
    """
    filters = JobSearchFilters(
        title=title,
        company_name=company,
        location=location,
        experience=experience,
    )
    return await job_service.search_jobs(filters)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
        job_data: JobCreate,
        job_service: JobService = Depends(get_job_service),
) -> JobResponse:
    return await job_service.create_job(job_data)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
        job_id: UUID,
        job_service: JobService = Depends(get_job_service),
) -> JobResponse:
    return await job_service.get_job(job_id)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
        job_id: UUID,
        job_data: JobUpdate,
        job_service: JobService = Depends(get_job_service),
) -> JobResponse:
    """Update the fields present in the body; a new company_id must exist."""
    return await job_service.update_job(job_id, job_data)


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
        job_id: UUID,
        job_service: JobService = Depends(get_job_service),
) -> MessageResponse:
    await job_service.delete_job(job_id)
    return MessageResponse(message="Job deleted successfully", data={"id": str(job_id)})


@router.get("/{job_id}/applicants", response_model=List[ApplicantResponse])
async def list_job_applicants(
        job_id: UUID,
        application_service: ApplicationService = Depends(get_application_service),
) -> List[ApplicantResponse]:
    """Applicants who applied for the job."""
    return await application_service.list_applicants_for_job(job_id)
