from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query

from crm_service.api.deps import CurrentPrincipal, PaginationDep, UoWDep
from crm_service.api.v1.schemas.common import PaginatedResponse
from crm_service.api.v1.schemas.customer import CustomerResponse
from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.domain.value_objects.enums import CustomerSize, CustomerStatus, CustomerType
from crm_service.services import customer_service

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("", response_model=PaginatedResponse[CustomerResponse])
async def list_customers(
    principal: CurrentPrincipal,
    uow: UoWDep,
    pagination: PaginationDep,
    search: str | None = Query(None, max_length=255),
    status: CustomerStatus | None = Query(None),
    type: CustomerType | None = Query(None),
    size: CustomerSize | None = Query(None),
    industry: str | None = Query(None, max_length=100),
    health_score_min: int | None = Query(None, alias="healthScoreMin", ge=0, le=100),
    health_score_max: int | None = Query(None, alias="healthScoreMax", ge=0, le=100),
) -> PaginatedResponse[CustomerResponse]:
    filters = CustomerFilterDTO(
        search=search,
        status=status,
        type=type,
        size=size,
        industry=industry,
        health_score_min=health_score_min,
        health_score_max=health_score_max,
        cursor=pagination.cursor,
        page_size=pagination.page_size,
        sort_order=pagination.sort_order,
    )
    page = await customer_service.list_customers(principal, filters, uow)
    return PaginatedResponse[CustomerResponse].from_page(
        page.map(lambda c: CustomerResponse.model_validate(c, from_attributes=True))
    )


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> CustomerResponse:
    customer = await customer_service.get_customer(customer_id, principal, uow)
    return CustomerResponse.model_validate(customer, from_attributes=True)
