from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.pagination.page import CursorPage, build_standard_cursor_response
from crm_service.domain.entities.customer import Customer
from crm_service.infrastructure.db.filters import LIKE_ESCAPE, contains_pattern
from crm_service.infrastructure.db.mappers import customer as mapper
from crm_service.infrastructure.db.models.customer import CustomerModel
from crm_service.infrastructure.db.pagination import paginate_select


class CustomerReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, organization_id: UUID, customer_id: UUID) -> Customer | None:
        stmt = select(CustomerModel).where(
            CustomerModel.id == customer_id,
            CustomerModel.organization_id == organization_id,
            CustomerModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def list_page(
        self,
        organization_id: UUID,
        filters: CustomerFilterDTO,
        page: PageRequest,
    ) -> CursorPage[Customer]:
        stmt = select(CustomerModel).where(
            CustomerModel.organization_id == organization_id,
            CustomerModel.deleted_at.is_(None),
        )
        if filters.search:
            stmt = stmt.where(
                CustomerModel.name.ilike(contains_pattern(filters.search), escape=LIKE_ESCAPE)
            )
        if filters.status:
            stmt = stmt.where(CustomerModel.status == filters.status.value)
        if filters.type:
            stmt = stmt.where(CustomerModel.type == filters.type.value)
        if filters.size:
            stmt = stmt.where(CustomerModel.size == filters.size.value)
        if filters.industry:
            stmt = stmt.where(
                CustomerModel.industry.ilike(contains_pattern(filters.industry), escape=LIKE_ESCAPE)
            )
        if filters.health_score_min is not None:
            stmt = stmt.where(CustomerModel.health_score >= filters.health_score_min)
        if filters.health_score_max is not None:
            stmt = stmt.where(CustomerModel.health_score <= filters.health_score_max)

        stmt = paginate_select(stmt, CustomerModel.created_at, CustomerModel.id, page)
        result = await self._session.execute(stmt)
        customers = [mapper.model_to_entity(m) for m in result.scalars().all()]
        return build_standard_cursor_response(customers, page.page_size)
