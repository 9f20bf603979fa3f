"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from operator import attrgetter
from typing import Any, Callable, Sequence, TypeVar
from uuid import UUID

import pytest

from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.application.dto.order import OrderFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.dto.principal import Principal
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.application.pagination.page import CursorPage, build_cursor_response
from crm_service.domain.entities.customer import Customer
from crm_service.domain.entities.order import Order
from crm_service.domain.entities.scheduled_call import ScheduledCall
from crm_service.domain.value_objects.enums import (
    CustomerStatus,
    CustomerType,
    OrderStatus,
    PaymentStatus,
    ScheduledCallStatus,
    SortDirection,
)

T = TypeVar("T")

ORG_ID = UUID("6f1c1d1e-0000-4000-8000-000000000001")
OTHER_ORG_ID = UUID("6f1c1d1e-0000-4000-8000-000000000002")
BASE_TS = datetime(2026, 1, 1, tzinfo=timezone.utc)


def seq_uuid(n: int) -> UUID:
    """Deterministic v4-shaped UUID whose sort order follows ``n``."""
    return UUID(f"00000000-0000-4000-8000-{n:012d}")


@pytest.fixture
def principal() -> Principal:
    return Principal(user_id=uuid.uuid4(), organization_id=ORG_ID)


def make_order(
    *,
    order_id: UUID | None = None,
    organization_id: UUID = ORG_ID,
    created_at: datetime | None = None,
    status: str = OrderStatus.CONFIRMED,
    payment_status: str = PaymentStatus.PENDING,
    customer_id: UUID | None = None,
    order_number: str = "ORD-0001",
    total: Decimal = Decimal("100.00"),
) -> Order:
    ts = created_at or datetime.now(timezone.utc)
    return Order(
        id=order_id or uuid.uuid4(),
        organization_id=organization_id,
        order_number=order_number,
        customer_id=customer_id or uuid.uuid4(),
        status=status,
        payment_status=payment_status,
        order_date=ts.date(),
        due_date=None,
        total=total,
        metadata=None,
        created_at=ts,
        updated_at=ts,
    )


def make_customer(
    *,
    customer_id: UUID | None = None,
    organization_id: UUID = ORG_ID,
    created_at: datetime | None = None,
    name: str = "Acme Pty Ltd",
    status: str = CustomerStatus.ACTIVE,
    health_score: int | None = 70,
) -> Customer:
    ts = created_at or datetime.now(timezone.utc)
    return Customer(
        id=customer_id or uuid.uuid4(),
        organization_id=organization_id,
        customer_code="CUST-0001",
        name=name,
        status=status,
        type=CustomerType.BUSINESS,
        size=None,
        industry=None,
        email=None,
        phone=None,
        health_score=health_score,
        created_at=ts,
        updated_at=ts,
    )


def make_scheduled_call(
    *,
    call_id: UUID | None = None,
    organization_id: UUID = ORG_ID,
    scheduled_at: datetime | None = None,
    status: str = ScheduledCallStatus.PENDING,
) -> ScheduledCall:
    ts = scheduled_at or datetime.now(timezone.utc)
    return ScheduledCall(
        id=call_id or uuid.uuid4(),
        organization_id=organization_id,
        customer_id=uuid.uuid4(),
        assignee_id=uuid.uuid4(),
        scheduled_at=ts,
        reminder_at=ts - timedelta(minutes=15),
        purpose="follow_up",
        notes=None,
        status=status,
        created_at=BASE_TS,
    )


def keyset_page(
    rows: Sequence[T],
    page: PageRequest,
    get_ts: Callable[[T], datetime] = attrgetter("created_at"),
) -> CursorPage[T]:
    """In-memory equivalent of paginate_select + build_cursor_response."""

    def sort_key(row: T) -> tuple[datetime, UUID]:
        return get_ts(row), row.id  # type: ignore[attr-defined]

    descending = page.direction == SortDirection.DESC
    ordered = sorted(rows, key=sort_key, reverse=descending)
    if page.position is not None:
        anchor = (page.position.created_at_value(), page.position.id_value())
        if descending:
            ordered = [r for r in ordered if sort_key(r) < anchor]
        else:
            ordered = [r for r in ordered if sort_key(r) > anchor]
    return build_cursor_response(
        ordered[: page.fetch_limit], page.page_size, get_ts, attrgetter("id"),
    )


@dataclass
class FakeOrderReader:
    _orders: list[Order] = field(default_factory=list)
    _calls: list[tuple[UUID, OrderFilterDTO, PageRequest]] = field(default_factory=list)

    async def get_by_id(self, organization_id: UUID, order_id: UUID) -> Order | None:
        for o in self._orders:
            if o.id == order_id and o.organization_id == organization_id:
                return o
        return None

    async def list_page(
        self, organization_id: UUID, filters: OrderFilterDTO, page: PageRequest,
    ) -> CursorPage[Order]:
        self._calls.append((organization_id, filters, page))
        rows = [o for o in self._orders if o.organization_id == organization_id]
        if filters.status:
            rows = [o for o in rows if o.status == filters.status]
        return keyset_page(rows, page)


@dataclass
class FakeCustomerReader:
    _customers: list[Customer] = field(default_factory=list)
    _calls: list[tuple[UUID, CustomerFilterDTO, PageRequest]] = field(default_factory=list)

    async def get_by_id(self, organization_id: UUID, customer_id: UUID) -> Customer | None:
        for c in self._customers:
            if c.id == customer_id and c.organization_id == organization_id:
                return c
        return None

    async def list_page(
        self, organization_id: UUID, filters: CustomerFilterDTO, page: PageRequest,
    ) -> CursorPage[Customer]:
        self._calls.append((organization_id, filters, page))
        rows = [c for c in self._customers if c.organization_id == organization_id]
        return keyset_page(rows, page)


@dataclass
class FakeScheduledCallReader:
    _calls_store: list[ScheduledCall] = field(default_factory=list)
    _calls: list[tuple[UUID, ScheduledCallFilterDTO, PageRequest]] = field(default_factory=list)

    async def list_page(
        self, organization_id: UUID, filters: ScheduledCallFilterDTO, page: PageRequest,
    ) -> CursorPage[ScheduledCall]:
        self._calls.append((organization_id, filters, page))
        rows = [c for c in self._calls_store if c.organization_id == organization_id]
        if filters.from_date is not None:
            rows = [c for c in rows if c.scheduled_at >= filters.from_date]
        if filters.to_date is not None:
            rows = [c for c in rows if c.scheduled_at <= filters.to_date]
        return keyset_page(rows, page, attrgetter("scheduled_at"))


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    orders: FakeOrderReader = field(default_factory=FakeOrderReader)
    customers: FakeCustomerReader = field(default_factory=FakeCustomerReader)
    scheduled_calls: FakeScheduledCallReader = field(default_factory=FakeScheduledCallReader)
    _rolled_back: bool = False

    async def rollback(self) -> None:
        self._rolled_back = True


def all_items(pages: list[CursorPage[Any]]) -> list[Any]:
    return [item for p in pages for item in p.items]
