from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm_service.application.dto.order import OrderFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.pagination.page import CursorPage, build_standard_cursor_response
from crm_service.domain.entities.order import Order
from crm_service.infrastructure.db.filters import LIKE_ESCAPE, contains_pattern
from crm_service.infrastructure.db.mappers import order as mapper
from crm_service.infrastructure.db.models.order import OrderModel
from crm_service.infrastructure.db.pagination import paginate_select


class OrderReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, organization_id: UUID, order_id: UUID) -> Order | None:
        stmt = select(OrderModel).where(
            OrderModel.id == order_id,
            OrderModel.organization_id == organization_id,
            OrderModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def list_page(
        self,
        organization_id: UUID,
        filters: OrderFilterDTO,
        page: PageRequest,
    ) -> CursorPage[Order]:
        stmt = select(OrderModel).where(
            OrderModel.organization_id == organization_id,
            OrderModel.deleted_at.is_(None),
        )
        if filters.search:
            stmt = stmt.where(
                OrderModel.order_number.ilike(contains_pattern(filters.search), escape=LIKE_ESCAPE)
            )
        if filters.status:
            stmt = stmt.where(OrderModel.status == filters.status.value)
        if filters.payment_status:
            stmt = stmt.where(OrderModel.payment_status == filters.payment_status.value)
        if filters.customer_id is not None:
            stmt = stmt.where(OrderModel.customer_id == filters.customer_id)
        if filters.min_total is not None:
            stmt = stmt.where(OrderModel.total >= filters.min_total)
        if filters.max_total is not None:
            stmt = stmt.where(OrderModel.total <= filters.max_total)

        stmt = paginate_select(stmt, OrderModel.created_at, OrderModel.id, page)
        result = await self._session.execute(stmt)
        orders = [mapper.model_to_entity(m) for m in result.scalars().all()]
        return build_standard_cursor_response(orders, page.page_size)
