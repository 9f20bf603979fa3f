from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Query

from crm_service.api.deps import CurrentPrincipal, PaginationDep, UoWDep
from crm_service.api.v1.schemas.common import PaginatedResponse
from crm_service.api.v1.schemas.order import OrderResponse
from crm_service.application.dto.order import OrderFilterDTO
from crm_service.domain.value_objects.enums import OrderStatus, PaymentStatus
from crm_service.services import order_service

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.get("", response_model=PaginatedResponse[OrderResponse])
async def list_orders(
    principal: CurrentPrincipal,
    uow: UoWDep,
    pagination: PaginationDep,
    status: OrderStatus | None = Query(None),
    payment_status: PaymentStatus | None = Query(None, alias="paymentStatus"),
    customer_id: UUID | None = Query(None, alias="customerId"),
    search: str | None = Query(None, max_length=100),
    min_total: Decimal | None = Query(None, alias="minTotal", ge=0),
    max_total: Decimal | None = Query(None, alias="maxTotal", ge=0),
) -> PaginatedResponse[OrderResponse]:
    filters = OrderFilterDTO(
        status=status,
        payment_status=payment_status,
        customer_id=customer_id,
        search=search,
        min_total=min_total,
        max_total=max_total,
        cursor=pagination.cursor,
        page_size=pagination.page_size,
        sort_order=pagination.sort_order,
    )
    page = await order_service.list_orders(principal, filters, uow)
    return PaginatedResponse[OrderResponse].from_page(
        page.map(lambda o: OrderResponse.model_validate(o, from_attributes=True))
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> OrderResponse:
    order = await order_service.get_order(order_id, principal, uow)
    return OrderResponse.model_validate(order, from_attributes=True)
