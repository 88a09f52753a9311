from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from typing import Optional, Sequence
from uuid import UUID

from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.job_applicant import JobApplicant
from jobboard.schemas.company import CompanyCreate, CompanyUpdate


class CompanyRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, company_data: CompanyCreate) -> Company:
        """Create a new company"""
        db_company = Company(**company_data.model_dump())
        self.db.add(db_company)
        await self.db.flush()
        await self.db.refresh(db_company)

        return db_company

    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        """Get company by ID"""
        result = await self.db.execute(
            select(Company).where(Company.id == company_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id_with_jobs(self, company_id: UUID) -> Optional[Company]:
        """Get company by ID with its jobs loaded"""
        result = await self.db.execute(
            select(Company)
            .options(selectinload(Company.jobs))
            .where(Company.id == company_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[Company]:
        result = await self.db.execute(
            select(Company).order_by(Company.name.asc(), Company.id.asc())
        )
        return result.scalars().all()

    async def update(self, company_id: UUID, company_data: CompanyUpdate) -> Company:
        """Apply the fields present in the payload"""
        company = await self.get_by_id(company_id)
        if not company:
            raise NotFoundError("No company record found", details={"id": str(company_id)})

        update_data = company_data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            raise ValidationError("No attributes to update", details={"id": str(company_id)})

        for field, value in update_data.items():
            setattr(company, field, value)

        await self.db.flush()
        await self.db.refresh(company)
        return company

    async def delete(self, company: Company) -> None:
        """Delete a company together with its jobs and their applicant edges"""
        company_jobs = select(Job.id).where(Job.company_id == company.id)

        await self.db.execute(
            delete(JobApplicant).where(JobApplicant.job_id.in_(company_jobs))
        )
        await self.db.execute(
            delete(Job)
            .where(Job.company_id == company.id)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.delete(company)
        await self.db.flush()
