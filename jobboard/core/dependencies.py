from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import get_db
from jobboard.repositories.applicant_repository import ApplicantRepository
from jobboard.repositories.company_repository import CompanyRepository
from jobboard.repositories.job_applicant_repository import JobApplicantRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.repositories.user_repository import UserRepository
from jobboard.services.applicant_service import ApplicantService
from jobboard.services.application_service import ApplicationService
from jobboard.services.company_service import CompanyService
from jobboard.services.job_service import JobService
from jobboard.services.user_service import UserService


# Repo Deps
async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Get user repository dependency."""
    return UserRepository(db)


async def get_company_repository(db: AsyncSession = Depends(get_db)) -> CompanyRepository:
    """Get company repository dependency."""
    return CompanyRepository(db)


async def get_job_repository(db: AsyncSession = Depends(get_db)) -> JobRepository:
    """Get job repository dependency."""
    return JobRepository(db)


async def get_applicant_repository(db: AsyncSession = Depends(get_db)) -> ApplicantRepository:
    return ApplicantRepository(db)


async def get_job_applicant_repository(db: AsyncSession = Depends(get_db)) -> JobApplicantRepository:
    return JobApplicantRepository(db)


# Service Deps
async def get_user_service(
        user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repo)


async def get_company_service(
        company_repo: CompanyRepository = Depends(get_company_repository),
) -> CompanyService:
    return CompanyService(company_repo)


async def get_job_service(
        job_repo: JobRepository = Depends(get_job_repository),
        company_repo: CompanyRepository = Depends(get_company_repository),
) -> JobService:
    return JobService(job_repo, company_repo)


async def get_applicant_service(
        applicant_repo: ApplicantRepository = Depends(get_applicant_repository),
) -> ApplicantService:
    return ApplicantService(applicant_repo)


async def get_application_service(
        job_applicant_repo: JobApplicantRepository = Depends(get_job_applicant_repository),
        job_repo: JobRepository = Depends(get_job_repository),
        applicant_repo: ApplicantRepository = Depends(get_applicant_repository),
) -> ApplicationService:
    return ApplicationService(job_applicant_repo, job_repo, applicant_repo)
