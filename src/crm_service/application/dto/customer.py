from __future__ import annotations

from dataclasses import dataclass

from crm_service.application.pagination.request import DEFAULT_PAGE_SIZE
from crm_service.domain.value_objects.enums import (
    CustomerSize,
    CustomerStatus,
    CustomerType,
    SortDirection,
)


@dataclass(frozen=True, slots=True)
class CustomerFilterDTO:
    search: str | None = None
    status: CustomerStatus | None = None
    type: CustomerType | None = None
    size: CustomerSize | None = None
    industry: str | None = None
    health_score_min: int | None = None
    health_score_max: int | None = None
    cursor: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    sort_order: SortDirection = SortDirection.DESC
