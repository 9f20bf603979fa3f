from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Order:
    id: UUID
    organization_id: UUID
    order_number: str
    customer_id: UUID
    status: str
    payment_status: str
    order_date: date
    due_date: date | None
    total: Decimal
    metadata: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
