from __future__ import annotations

from typing import Protocol

from crm_service.application.repositories.customer import CustomerReader
from crm_service.application.repositories.order import OrderReader
from crm_service.application.repositories.scheduled_call import ScheduledCallReader


class UnitOfWork(Protocol):
    orders: OrderReader
    customers: CustomerReader
    scheduled_calls: ScheduledCallReader

    async def rollback(self) -> None: ...
