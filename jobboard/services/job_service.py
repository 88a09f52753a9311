from typing import List
from uuid import UUID

from jobboard.core.exceptions import NotFoundError
from jobboard.core.logger import AppLogger
from jobboard.repositories.company_repository import CompanyRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.schemas.job import JobCreate, JobResponse, JobSearchFilters, JobUpdate

logger = AppLogger("job_service")


class JobService:
    def __init__(
            self,
            job_repo: JobRepository,
            company_repo: CompanyRepository,
    ):
        self.job_repo = job_repo
        self.company_repo = company_repo

    async def create_job(self, job_data: JobCreate) -> JobResponse:
        company = await self.company_repo.get_by_id(job_data.company_id)
        if not company:
            raise NotFoundError("No company record found", details={"id": str(job_data.company_id)})

        db_job = await self.job_repo.create(job_data, company)
        logger.info("Job created", job_id=db_job.id, company_id=company.id, title=db_job.title)

        return JobResponse.model_validate(db_job)

    async def get_job(self, job_id: UUID) -> JobResponse:
        db_job = await self.job_repo.get_by_id(job_id)
        if not db_job:
            raise NotFoundError("No job record found", details={"id": str(job_id)})
        return JobResponse.model_validate(db_job)

    async def search_jobs(self, filters: JobSearchFilters) -> List[JobResponse]:
        """Search jobs; with no filters every job is returned, still sorted."""
        jobs = await self.job_repo.search(filters)
        logger.debug("Job search", filters=filters.active_filters(), results=len(jobs))
        return [JobResponse.model_validate(job) for job in jobs]

    async def update_job(self, job_id: UUID, job_data: JobUpdate) -> JobResponse:
        db_job = await self.job_repo.get_by_id(job_id)
        if not db_job:
            raise NotFoundError("No job record found", details={"id": str(job_id)})

        # Resolve the new owner before touching the job
        company = None
        if job_data.company_id is not None:
            company = await self.company_repo.get_by_id(job_data.company_id)
            if not company:
                raise NotFoundError("No company record found", details={"id": str(job_data.company_id)})

        updated_job = await self.job_repo.update(job_id, job_data, company)
        logger.info(
            "Job updated",
            job_id=job_id,
            fields=sorted(job_data.model_dump(exclude_unset=True, exclude_none=True)),
        )
        return JobResponse.model_validate(updated_job)

    async def delete_job(self, job_id: UUID) -> None:
        db_job = await self.job_repo.get_by_id(job_id)
        if not db_job:
            raise NotFoundError("No job record found", details={"id": str(job_id)})

        await self.job_repo.delete(db_job)
        logger.info("Job deleted", job_id=job_id)
