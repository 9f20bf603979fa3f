from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from crm_service.application.pagination.request import DEFAULT_PAGE_SIZE
from crm_service.domain.value_objects.enums import ScheduledCallStatus, SortDirection


@dataclass(frozen=True, slots=True)
class ScheduledCallFilterDTO:
    customer_id: UUID | None = None
    assignee_id: UUID | None = None
    status: ScheduledCallStatus | None = None
    from_date: datetime | None = None
    to_date: datetime | None = None
    cursor: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    sort_order: SortDirection = SortDirection.DESC
