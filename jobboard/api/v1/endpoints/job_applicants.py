from typing import List

from fastapi import APIRouter, Depends

from jobboard.core.dependencies import get_application_service
from jobboard.schemas.job import JobWithApplicants
from jobboard.schemas.job_applicant import JobApplicantRequest, JobApplicantResponse
from jobboard.services.application_service import ApplicationService

router = APIRouter()


@router.post("", response_model=JobApplicantResponse)
async def apply_to_job(
        payload: JobApplicantRequest,
        application_service: ApplicationService = Depends(get_application_service),
) -> JobApplicantResponse:
    """
    Submit an application

    Responds 409 when the applicant already applied for the job.
    """
    await application_service.link_applicant_to_job(payload.job_id, payload.applicant_id)
    return JobApplicantResponse(
        message="Application submitted successfully",
        job_id=payload.job_id,
        applicant_id=payload.applicant_id,
    )


@router.get("", response_model=List[JobWithApplicants])
async def list_jobs_with_applicants(
        application_service: ApplicationService = Depends(get_application_service),
) -> List[JobWithApplicants]:
    """Every job with the applicants who applied for it."""
    return await application_service.list_jobs_with_applicants()


@router.delete("", response_model=JobApplicantResponse)
async def withdraw_application(
        payload: JobApplicantRequest,
        application_service: ApplicationService = Depends(get_application_service),
) -> JobApplicantResponse:
    """Remove an application; succeeds even if none existed."""
    removed = await application_service.unlink_applicant_from_job(payload.job_id, payload.applicant_id)
    return JobApplicantResponse(
        message="Application removed successfully" if removed else "No application to remove",
        job_id=payload.job_id,
        applicant_id=payload.applicant_id,
    )
