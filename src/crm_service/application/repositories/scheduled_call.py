from __future__ import annotations

from typing import Protocol
from uuid import UUID

from crm_service.application.dto.pagination import PageRequest
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.application.pagination.page import CursorPage
from crm_service.domain.entities.scheduled_call import ScheduledCall


class ScheduledCallReader(Protocol):
    async def list_page(
        self,
        organization_id: UUID,
        filters: ScheduledCallFilterDTO,
        page: PageRequest,
    ) -> CursorPage[ScheduledCall]:
        """Page ordered by (scheduled_at, id); the cursor carries scheduled_at."""
        ...
