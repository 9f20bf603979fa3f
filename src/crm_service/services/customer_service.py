from __future__ import annotations

import uuid

from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.application.dto.principal import Principal
from crm_service.application.exceptions import NotFoundError, ValidationError
from crm_service.application.pagination.page import CursorPage
from crm_service.application.pagination.request import resolve_page_request
from crm_service.application.uow import UnitOfWork
from crm_service.config import settings
from crm_service.domain.entities.customer import Customer


async def list_customers(
    principal: Principal,
    filters: CustomerFilterDTO,
    uow: UnitOfWork,
) -> CursorPage[Customer]:
    if (
        filters.health_score_min is not None
        and filters.health_score_max is not None
        and filters.health_score_min > filters.health_score_max
    ):
        raise ValidationError("healthScoreMin must not exceed healthScoreMax")

    page = resolve_page_request(
        filters.cursor,
        filters.page_size,
        filters.sort_order,
        strict=settings.PAGINATION_STRICT_CURSOR,
    )
    return await uow.customers.list_page(principal.organization_id, filters, page)


async def get_customer(
    customer_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Customer:
    customer = await uow.customers.get_by_id(principal.organization_id, customer_id)
    if customer is None:
        raise NotFoundError("Customer not found")
    return customer
