"""SQL emitted by the reader repositories, compiled for PostgreSQL."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.dialects import postgresql

from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.application.dto.order import OrderFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.application.pagination.cursor import CursorPosition, decode_cursor
from crm_service.domain.value_objects.enums import CustomerSize, CustomerType, SortDirection
from crm_service.infrastructure.db.filters import contains_pattern
from crm_service.infrastructure.db.models.scheduled_call import ScheduledCallModel
from crm_service.infrastructure.db.repositories.customer import CustomerReaderRepo
from crm_service.infrastructure.db.repositories.order import OrderReaderRepo
from crm_service.infrastructure.db.repositories.scheduled_call import ScheduledCallReaderRepo
from tests.conftest import BASE_TS, ORG_ID, seq_uuid

POSITION = CursorPosition(created_at="2026-01-02T00:00:00+00:00", id=str(seq_uuid(2)))


@dataclass
class _Scalars:
    rows: list[Any]

    def all(self) -> list[Any]:
        return self.rows


@dataclass
class _Result:
    rows: list[Any]

    def scalars(self) -> _Scalars:
        return _Scalars(self.rows)

    def scalar_one_or_none(self) -> Any:
        return self.rows[0] if self.rows else None


@dataclass
class FakeSession:
    """Records statements instead of running them."""
    rows: list[Any] = field(default_factory=list)
    statements: list[Any] = field(default_factory=list)

    async def execute(self, stmt: Any) -> _Result:
        self.statements.append(stmt)
        return _Result(self.rows)

    def compiled(self):
        return self.statements[-1].compile(dialect=postgresql.dialect())


def test_contains_pattern_escapes_wildcards():
    assert contains_pattern("50%_a\\b") == "%50\\%\\_a\\\\b%"


def test_contains_pattern_plain_term():
    assert contains_pattern("ORD-1") == "%ORD-1%"


@pytest.mark.asyncio
async def test_order_list_page_combines_scope_search_and_cursor():
    session = FakeSession()
    repo = OrderReaderRepo(session)  # type: ignore[arg-type]

    await repo.list_page(
        ORG_ID,
        OrderFilterDTO(search="50%_a"),
        PageRequest(position=POSITION, page_size=2),
    )

    compiled = session.compiled()
    sql = str(compiled)
    assert sql.count("WHERE") == 1
    where = sql.split("WHERE", 1)[1]
    assert "orders.organization_id = " in where
    assert "orders.deleted_at IS NULL" in where
    assert "orders.order_number ILIKE " in where
    assert "ESCAPE" in where
    assert "orders.created_at < " in where
    assert "orders.id < " in where
    assert "ORDER BY orders.created_at DESC, orders.id DESC" in sql
    params = list(compiled.params.values())
    assert ORG_ID in params
    assert "%50\\%\\_a%" in params
    assert "LIMIT" in sql


@pytest.mark.asyncio
async def test_order_list_page_total_bounds():
    session = FakeSession()
    repo = OrderReaderRepo(session)  # type: ignore[arg-type]

    await repo.list_page(
        ORG_ID,
        OrderFilterDTO(min_total=Decimal("10"), max_total=Decimal("99.50")),
        PageRequest(position=None, page_size=20),
    )

    compiled = session.compiled()
    sql = str(compiled)
    assert "orders.total >= " in sql
    assert "orders.total <= " in sql
    assert "orders.created_at <" not in sql
    assert Decimal("99.50") in compiled.params.values()


@pytest.mark.asyncio
async def test_order_get_by_id_excludes_deleted_and_other_tenants():
    session = FakeSession()
    repo = OrderReaderRepo(session)  # type: ignore[arg-type]

    assert await repo.get_by_id(ORG_ID, seq_uuid(1)) is None

    sql = str(session.compiled())
    assert "orders.organization_id = " in sql
    assert "orders.deleted_at IS NULL" in sql


@pytest.mark.asyncio
async def test_customer_list_page_filters():
    session = FakeSession()
    repo = CustomerReaderRepo(session)  # type: ignore[arg-type]

    await repo.list_page(
        ORG_ID,
        CustomerFilterDTO(
            search="acme",
            type=CustomerType.BUSINESS,
            size=CustomerSize.SMALL,
            industry="agri_",
            health_score_min=20,
            health_score_max=80,
            sort_order=SortDirection.ASC,
        ),
        PageRequest(position=POSITION, page_size=5, direction=SortDirection.ASC),
    )

    compiled = session.compiled()
    sql = str(compiled)
    assert sql.count("WHERE") == 1
    assert "customers.organization_id = " in sql
    assert "customers.deleted_at IS NULL" in sql
    assert "customers.name ILIKE " in sql
    assert "customers.industry ILIKE " in sql
    assert "customers.type = " in sql
    assert "customers.size = " in sql
    assert "customers.health_score >= " in sql
    assert "customers.health_score <= " in sql
    assert "customers.created_at > " in sql
    assert "ORDER BY customers.created_at ASC, customers.id ASC" in sql
    params = list(compiled.params.values())
    assert "%agri\\_%" in params
    assert "small" in params


@pytest.mark.asyncio
async def test_scheduled_call_list_page_keys_on_scheduled_at():
    session = FakeSession(
        rows=[
            ScheduledCallModel(
                id=seq_uuid(i),
                organization_id=ORG_ID,
                customer_id=seq_uuid(50),
                assignee_id=seq_uuid(60),
                scheduled_at=BASE_TS + timedelta(days=10 - i),
                reminder_at=None,
                purpose="follow_up",
                notes=None,
                status="pending",
                created_at=BASE_TS,
            )
            for i in range(3)
        ]
    )
    repo = ScheduledCallReaderRepo(session)  # type: ignore[arg-type]

    page = await repo.list_page(
        ORG_ID,
        ScheduledCallFilterDTO(from_date=BASE_TS, to_date=BASE_TS + timedelta(days=30)),
        PageRequest(position=None, page_size=2),
    )

    sql = str(session.compiled())
    assert "scheduled_calls.organization_id = " in sql
    assert "scheduled_calls.scheduled_at >= " in sql
    assert "scheduled_calls.scheduled_at <= " in sql
    assert "ORDER BY scheduled_calls.scheduled_at DESC, scheduled_calls.id DESC" in sql

    assert [c.id for c in page.items] == [seq_uuid(0), seq_uuid(1)]
    assert page.has_next_page is True
    position = decode_cursor(page.next_cursor)
    assert position.created_at_value() == BASE_TS + timedelta(days=9)
    assert position.id_value() == seq_uuid(1)
