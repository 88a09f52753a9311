from collections import defaultdict
from typing import Dict, List, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from jobboard.core.exceptions import ConflictError, NotFoundError
from jobboard.models.applicant import Applicant
from jobboard.models.job import Job
from jobboard.models.job_applicant import JobApplicant


class JobApplicantRepository:
    """Owns the job <-> applicant edge table; both directions are read from it."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, job_id: UUID, applicant_id: UUID) -> bool:
        result = await self.db.execute(
            select(JobApplicant.job_id).where(
                JobApplicant.job_id == job_id,
                JobApplicant.applicant_id == applicant_id,
            )
        )
        return result.scalar_one_or_none() is not None

    async def add(self, job_id: UUID, applicant_id: UUID) -> JobApplicant:
        edge = JobApplicant(job_id=job_id, applicant_id=applicant_id)
        self.db.add(edge)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            # A concurrent request stored the same pair after our check
            if await self.exists(job_id, applicant_id):
                raise ConflictError(
                    "Applicant already exists",
                    details={"job_id": str(job_id), "applicant_id": str(applicant_id)},
                )
            # Otherwise a foreign key failed: one side was deleted after the service checked it
            await self._ensure_endpoints(job_id, applicant_id)
            raise
        return edge

    async def _ensure_endpoints(self, job_id: UUID, applicant_id: UUID) -> None:
        if await self.db.scalar(select(Job.id).where(Job.id == job_id)) is None:
            raise NotFoundError("No job record found", details={"id": str(job_id)})
        if await self.db.scalar(select(Applicant.id).where(Applicant.id == applicant_id)) is None:
            raise NotFoundError("No applicant record found", details={"id": str(applicant_id)})

    async def remove(self, job_id: UUID, applicant_id: UUID) -> bool:
        """Delete the edge; returns False when there was none."""
        result = await self.db.execute(
            delete(JobApplicant).where(
                JobApplicant.job_id == job_id,
                JobApplicant.applicant_id == applicant_id,
            )
        )
        await self.db.flush()
        return result.rowcount > 0

    async def get_applicants_for_job(self, job_id: UUID) -> Sequence[Applicant]:
        result = await self.db.execute(
            select(Applicant)
            .join(JobApplicant, JobApplicant.applicant_id == Applicant.id)
            .where(JobApplicant.job_id == job_id)
            .order_by(JobApplicant.applied_at.asc(), Applicant.id.asc())
        )
        return result.scalars().all()

    async def get_jobs_for_applicant(self, applicant_id: UUID) -> Sequence[Job]:
        result = await self.db.execute(
            select(Job)
            .join(Job.company)
            .options(contains_eager(Job.company))
            .join(JobApplicant, JobApplicant.job_id == Job.id)
            .where(JobApplicant.applicant_id == applicant_id)
            .order_by(Job.title.asc(), Job.id.asc())
        )
        return result.scalars().all()

    async def get_applicants_by_job(self) -> Dict[UUID, List[Applicant]]:
        """Every edge, grouped as job id -> applicants."""
        result = await self.db.execute(
            select(JobApplicant.job_id, Applicant)
            .join(Applicant, JobApplicant.applicant_id == Applicant.id)
            .order_by(JobApplicant.applied_at.asc(), Applicant.id.asc())
        )
        grouped: Dict[UUID, List[Applicant]] = defaultdict(list)
        for job_id, applicant in result.all():
            grouped[job_id].append(applicant)
        return grouped
