from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import ConfigDict

from crm_service.api.v1.schemas.common import ApiModel


class OrderResponse(ApiModel):
    id: UUID
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

    model_config = ConfigDict(from_attributes=True)
