from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.core.dependencies import get_company_service
from jobboard.schemas.common import MessageResponse
from jobboard.schemas.company import Company, CompanyCreate, CompanyDetail, CompanyUpdate
from jobboard.services.company_service import CompanyService

router = APIRouter()


@router.get("", response_model=List[Company])
async def list_companies(
        company_service: CompanyService = Depends(get_company_service),
) -> List[Company]:
    """List all companies."""
    return await company_service.list_companies()


@router.post("", response_model=Company, status_code=status.HTTP_201_CREATED)
async def create_company(
        company_data: CompanyCreate,
        company_service: CompanyService = Depends(get_company_service),
) -> Company:
    return await company_service.create_company(company_data)


@router.get("/{company_id}", response_model=CompanyDetail)
async def get_company(
        company_id: UUID,
        company_service: CompanyService = Depends(get_company_service),
) -> CompanyDetail:
    """Get a company together with the jobs it offers."""
    return await company_service.get_company(company_id)


@router.put("/{company_id}", response_model=Company)
async def update_company(
        company_id: UUID,
        company_data: CompanyUpdate,
        company_service: CompanyService = Depends(get_company_service),
) -> Company:
    """
    Update company information

    Only the fields present in the body are changed.
    """
    return await company_service.update_company(company_id, company_data)


@router.delete("/{company_id}", response_model=MessageResponse)
async def delete_company(
        company_id: UUID,
        company_service: CompanyService = Depends(get_company_service),
) -> MessageResponse:
    """Delete a company, its jobs and their applications."""
    await company_service.delete_company(company_id)
    return MessageResponse(message="Company deleted successfully", data={"id": str(company_id)})
