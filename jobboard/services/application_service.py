from typing import List
from uuid import UUID

from jobboard.core.exceptions import ConflictError, NotFoundError
from jobboard.core.logger import AppLogger
from jobboard.repositories.applicant_repository import ApplicantRepository
from jobboard.repositories.job_applicant_repository import JobApplicantRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.schemas.applicant import ApplicantResponse, ApplicantSummary
from jobboard.schemas.job import JobResponse, JobSearchFilters, JobWithApplicants

logger = AppLogger("application_service")


class ApplicationService:
    """Links applicants to jobs.

    Both directions of the relation are read from the same edge table, so a
    link or unlink is visible from the job and the applicant at once.
    """

    def __init__(
        self,
        job_applicant_repo: JobApplicantRepository,
        job_repo: JobRepository,
        applicant_repo: ApplicantRepository,
    ):
        self.job_applicant_repo = job_applicant_repo
        self.job_repo = job_repo
        self.applicant_repo = applicant_repo

    async def _ensure_job(self, job_id: UUID) -> None:
        if await self.job_repo.get_by_id(job_id) is None:
            raise NotFoundError("No job record found", details={"id": str(job_id)})

    async def _ensure_applicant(self, applicant_id: UUID) -> None:
        if await self.applicant_repo.get_by_id(applicant_id) is None:
            raise NotFoundError("No applicant record found", details={"id": str(applicant_id)})

    async def link_applicant_to_job(self, job_id: UUID, applicant_id: UUID) -> None:
        await self._ensure_job(job_id)
        await self._ensure_applicant(applicant_id)

        # Fast path; the edge table's primary key settles races
        if await self.job_applicant_repo.exists(job_id, applicant_id):
            logger.warning("Duplicate application rejected", job_id=job_id, applicant_id=applicant_id)
            raise ConflictError(
                "Applicant already exists",
                details={"job_id": str(job_id), "applicant_id": str(applicant_id)},
            )

        await self.job_applicant_repo.add(job_id, applicant_id)
        logger.info("Applicant linked to job", job_id=job_id, applicant_id=applicant_id)

    async def unlink_applicant_from_job(self, job_id: UUID, applicant_id: UUID) -> bool:
        """Remove the edge if present; returns whether anything was removed."""
        await self._ensure_job(job_id)
        await self._ensure_applicant(applicant_id)

        removed = await self.job_applicant_repo.remove(job_id, applicant_id)
        logger.info(
            "Applicant unlinked from job",
            job_id=job_id,
            applicant_id=applicant_id,
            removed=removed,
        )
        return removed

    async def list_applicants_for_job(self, job_id: UUID) -> List[ApplicantResponse]:
        await self._ensure_job(job_id)
        applicants = await self.job_applicant_repo.get_applicants_for_job(job_id)
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def list_jobs_for_applicant(self, applicant_id: UUID) -> List[JobResponse]:
        await self._ensure_applicant(applicant_id)
        jobs = await self.job_applicant_repo.get_jobs_for_applicant(applicant_id)
        return [JobResponse.model_validate(job) for job in jobs]

    async def list_jobs_with_applicants(self) -> List[JobWithApplicants]:
        jobs = await self.job_repo.search(JobSearchFilters())
        applicants_by_job = await self.job_applicant_repo.get_applicants_by_job()

        return [
            JobWithApplicants(
                id=job.id,
                title=job.title,
                description=job.description,
                experience=job.experience,
                applicants=[
                    ApplicantSummary.model_validate(a)
                    for a in applicants_by_job.get(job.id, [])
                ],
            )
            for job in jobs
        ]
