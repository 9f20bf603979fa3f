from __future__ import annotations

from operator import attrgetter
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm_service.application.dto.pagination import PageRequest
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.application.pagination.page import CursorPage, build_cursor_response
from crm_service.domain.entities.scheduled_call import ScheduledCall
from crm_service.infrastructure.db.mappers import scheduled_call as mapper
from crm_service.infrastructure.db.models.scheduled_call import ScheduledCallModel
from crm_service.infrastructure.db.pagination import paginate_select


class ScheduledCallReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_page(
        self,
        organization_id: UUID,
        filters: ScheduledCallFilterDTO,
        page: PageRequest,
    ) -> CursorPage[ScheduledCall]:
        stmt = select(ScheduledCallModel).where(
            ScheduledCallModel.organization_id == organization_id,
        )
        if filters.customer_id is not None:
            stmt = stmt.where(ScheduledCallModel.customer_id == filters.customer_id)
        if filters.assignee_id is not None:
            stmt = stmt.where(ScheduledCallModel.assignee_id == filters.assignee_id)
        if filters.status:
            stmt = stmt.where(ScheduledCallModel.status == filters.status.value)
        if filters.from_date is not None:
            stmt = stmt.where(ScheduledCallModel.scheduled_at >= filters.from_date)
        if filters.to_date is not None:
            stmt = stmt.where(ScheduledCallModel.scheduled_at <= filters.to_date)

        # Calls are keyed on when they happen, not when they were booked
        stmt = paginate_select(stmt, ScheduledCallModel.scheduled_at, ScheduledCallModel.id, page)
        result = await self._session.execute(stmt)
        calls = [mapper.model_to_entity(m) for m in result.scalars().all()]
        return build_cursor_response(
            calls,
            page.page_size,
            attrgetter("scheduled_at"),
            attrgetter("id"),
        )
