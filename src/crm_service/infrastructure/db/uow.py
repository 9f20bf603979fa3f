from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from crm_service.infrastructure.db.repositories.customer import CustomerReaderRepo
from crm_service.infrastructure.db.repositories.order import OrderReaderRepo
from crm_service.infrastructure.db.repositories.scheduled_call import ScheduledCallReaderRepo


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.orders = OrderReaderRepo(session)
        self.customers = CustomerReaderRepo(session)
        self.scheduled_calls = ScheduledCallReaderRepo(session)

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
