from typing import List
from uuid import UUID

from jobboard.core.exceptions import NotFoundError
from jobboard.core.logger import AppLogger
from jobboard.repositories.company_repository import CompanyRepository
from jobboard.schemas.company import Company, CompanyCreate, CompanyDetail, CompanyUpdate

logger = AppLogger("company_service")


class CompanyService:
    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def create_company(self, company_data: CompanyCreate) -> Company:
        db_company = await self.company_repo.create(company_data)
        logger.info("Company created", company_id=db_company.id, name=db_company.name)
        return Company.model_validate(db_company)

    async def list_companies(self) -> List[Company]:
        companies = await self.company_repo.get_all()
        return [Company.model_validate(company) for company in companies]

    async def get_company(self, company_id: UUID) -> CompanyDetail:
        """Company with the jobs it offers"""
        db_company = await self.company_repo.get_by_id_with_jobs(company_id)
        if not db_company:
            raise NotFoundError("No company record found", details={"id": str(company_id)})
        return CompanyDetail.model_validate(db_company)

    async def update_company(self, company_id: UUID, company_data: CompanyUpdate) -> Company:
        db_company = await self.company_repo.update(company_id, company_data)
        logger.info(
            "Company updated",
            company_id=company_id,
            fields=sorted(company_data.model_dump(exclude_unset=True, exclude_none=True)),
        )
        return Company.model_validate(db_company)

    async def delete_company(self, company_id: UUID) -> None:
        db_company = await self.company_repo.get_by_id(company_id)
        if not db_company:
            raise NotFoundError("No company record found", details={"id": str(company_id)})

        await self.company_repo.delete(db_company)
        logger.info("Company deleted", company_id=company_id)
