from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ScheduledCall:
    id: UUID
    organization_id: UUID
    customer_id: UUID
    assignee_id: UUID
    scheduled_at: datetime
    reminder_at: datetime | None
    purpose: str
    notes: str | None
    status: str
    created_at: datetime
