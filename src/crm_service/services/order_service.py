from __future__ import annotations

import uuid

from crm_service.application.dto.order import OrderFilterDTO
from crm_service.application.dto.principal import Principal
from crm_service.application.exceptions import NotFoundError
from crm_service.application.pagination.page import CursorPage
from crm_service.application.pagination.request import resolve_page_request
from crm_service.application.uow import UnitOfWork
from crm_service.config import settings
from crm_service.domain.entities.order import Order


async def list_orders(
    principal: Principal,
    filters: OrderFilterDTO,
    uow: UnitOfWork,
) -> CursorPage[Order]:
    page = resolve_page_request(
        filters.cursor,
        filters.page_size,
        filters.sort_order,
        strict=settings.PAGINATION_STRICT_CURSOR,
    )
    return await uow.orders.list_page(principal.organization_id, filters, page)


async def get_order(
    order_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Order:
    order = await uow.orders.get_by_id(principal.organization_id, order_id)
    if order is None:
        raise NotFoundError("Order not found")
    return order
