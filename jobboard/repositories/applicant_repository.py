from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.models.applicant import Applicant
from jobboard.models.job_applicant import JobApplicant
from jobboard.schemas.applicant import ApplicantCreate, ApplicantUpdate


class ApplicantRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, applicant_data: ApplicantCreate) -> Applicant:
        applicant = Applicant(**applicant_data.model_dump())
        self.db.add(applicant)
        await self.db.flush()
        await self.db.refresh(applicant)
        return applicant

    async def get_by_id(self, applicant_id: UUID) -> Optional[Applicant]:
        result = await self.db.execute(
            select(Applicant).where(Applicant.id == applicant_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[Applicant]:
        result = await self.db.execute(
            select(Applicant).order_by(Applicant.name.asc(), Applicant.id.asc())
        )
        return result.scalars().all()

    async def update(self, applicant_id: UUID, applicant_data: ApplicantUpdate) -> Applicant:
        applicant = await self.get_by_id(applicant_id)
        if not applicant:
            raise NotFoundError("No applicant record found", details={"id": str(applicant_id)})

        update_data = applicant_data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            raise ValidationError("No attributes to update", details={"id": str(applicant_id)})

        for field, value in update_data.items():
            setattr(applicant, field, value)

        await self.db.flush()
        await self.db.refresh(applicant)
        return applicant

    async def delete(self, applicant: Applicant) -> None:
        """Delete an applicant and every job application it holds"""
        await self.db.execute(
            delete(JobApplicant).where(JobApplicant.applicant_id == applicant.id)
        )
        await self.db.delete(applicant)
        await self.db.flush()
