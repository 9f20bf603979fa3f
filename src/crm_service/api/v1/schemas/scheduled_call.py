from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from crm_service.api.v1.schemas.common import ApiModel


class ScheduledCallResponse(ApiModel):
    id: UUID
    customer_id: UUID
    assignee_id: UUID
    scheduled_at: datetime
    reminder_at: datetime | None
    purpose: str
    notes: str | None
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
