from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from crm_service.application.pagination.request import DEFAULT_PAGE_SIZE
from crm_service.domain.value_objects.enums import OrderStatus, PaymentStatus, SortDirection


@dataclass(frozen=True, slots=True)
class OrderFilterDTO:
    status: OrderStatus | None = None
    payment_status: PaymentStatus | None = None
    customer_id: UUID | None = None
    search: str | None = None
    min_total: Decimal | None = None
    max_total: Decimal | None = None
    cursor: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    sort_order: SortDirection = SortDirection.DESC
