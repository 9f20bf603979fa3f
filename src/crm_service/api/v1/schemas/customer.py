from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from crm_service.api.v1.schemas.common import ApiModel


class CustomerResponse(ApiModel):
    id: UUID
    customer_code: str
    name: str
    status: str
    type: str
    size: str | None
    industry: str | None
    email: str | None
    phone: str | None
    health_score: int | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
