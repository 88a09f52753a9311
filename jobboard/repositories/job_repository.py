from sqlalchemy import Select, select, delete, asc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager
from typing import Optional, Sequence
from uuid import UUID

from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.job_applicant import JobApplicant
from jobboard.schemas.job import JobCreate, JobSearchFilters, JobUpdate


def _apply_search_filters(query: Select, filters: JobSearchFilters) -> Select:
    """Narrow a job query with every filter that is present.

    Each filter is a case-insensitive substring match; LIKE wildcards in the
    input are escaped so the value is matched literally.
    """
    if filters.title:
        query = query.where(Job.title.icontains(filters.title, autoescape=True))

    if filters.company_name:
        query = query.where(Company.name.icontains(filters.company_name, autoescape=True))

    if filters.location:
        query = query.where(Company.location.icontains(filters.location, autoescape=True))

    if filters.experience:
        query = query.where(Job.experience.icontains(filters.experience, autoescape=True))

    return query


def _base_job_query() -> Select:
    return (
        select(Job)
        .join(Job.company)
        .options(contains_eager(Job.company))
    )


class JobRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, job_data: JobCreate, company: Company) -> Job:
        """Create a job owned by an already resolved company"""
        job_dict = job_data.model_dump(exclude={"company_id"})

        db_job = Job(**job_dict, company=company)
        self.db.add(db_job)
        await self.db.flush()

        return db_job

    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID"""
        query = _base_job_query().where(Job.id == job_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def search(self, filters: JobSearchFilters) -> Sequence[Job]:
        """Jobs matching all present filters, ordered by title then id"""
        query = _apply_search_filters(_base_job_query(), filters)
        query = query.order_by(asc(Job.title), asc(Job.id))

        result = await self.db.execute(query)
        return result.scalars().all()

    async def update(self, job_id: UUID, job_data: JobUpdate, company: Optional[Company] = None) -> Job:
        """Apply the fields present in the payload.

        ``company`` must be the resolved target when ``job_data.company_id`` is set.
        """
        db_job = await self.get_by_id(job_id)
        if not db_job:
            raise NotFoundError("No job record found", details={"id": str(job_id)})

        update_data = job_data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            raise ValidationError("No attributes to update", details={"id": str(job_id)})

        if update_data.pop("company_id", None) is not None:
            db_job.company = company

        for field, value in update_data.items():
            setattr(db_job, field, value)

        await self.db.flush()
        await self.db.refresh(db_job)
        return db_job

    async def delete(self, job: Job) -> None:
        """Delete a job and its applicant edges"""
        await self.db.execute(
            delete(JobApplicant).where(JobApplicant.job_id == job.id)
        )
        await self.db.delete(job)
        await self.db.flush()
