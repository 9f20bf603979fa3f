from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Customer:
    id: UUID
    organization_id: UUID
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
