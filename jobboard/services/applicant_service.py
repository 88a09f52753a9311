from typing import List
from uuid import UUID

from jobboard.core.exceptions import NotFoundError
from jobboard.core.logger import AppLogger
from jobboard.repositories.applicant_repository import ApplicantRepository
from jobboard.schemas.applicant import ApplicantCreate, ApplicantResponse, ApplicantUpdate

logger = AppLogger("applicant_service")


class ApplicantService:
    def __init__(self, applicant_repo: ApplicantRepository):
        self.applicant_repo = applicant_repo

    async def create_applicant(self, applicant_data: ApplicantCreate) -> ApplicantResponse:
        applicant = await self.applicant_repo.create(applicant_data)
        logger.info("Applicant created", applicant_id=applicant.id)
        return ApplicantResponse.model_validate(applicant)

    async def list_applicants(self) -> List[ApplicantResponse]:
        applicants = await self.applicant_repo.get_all()
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def get_applicant(self, applicant_id: UUID) -> ApplicantResponse:
        applicant = await self.applicant_repo.get_by_id(applicant_id)
        if applicant is None:
            raise NotFoundError("No applicant record found", details={"id": str(applicant_id)})
        return ApplicantResponse.model_validate(applicant)

    async def update_applicant(self, applicant_id: UUID, payload: ApplicantUpdate) -> ApplicantResponse:
        applicant = await self.applicant_repo.update(applicant_id, payload)
        logger.info("Applicant updated", applicant_id=applicant_id)
        return ApplicantResponse.model_validate(applicant)

    async def delete_applicant(self, applicant_id: UUID) -> None:
        applicant = await self.applicant_repo.get_by_id(applicant_id)
        if applicant is None:
            raise NotFoundError("No applicant record found", details={"id": str(applicant_id)})

        await self.applicant_repo.delete(applicant)
        logger.info("Applicant deleted", applicant_id=applicant_id)
