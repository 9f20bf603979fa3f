from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Query

from crm_service.api.deps import CurrentPrincipal, PaginationDep, UoWDep
from crm_service.api.v1.schemas.common import PaginatedResponse
from crm_service.api.v1.schemas.scheduled_call import ScheduledCallResponse
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.domain.value_objects.enums import ScheduledCallStatus
from crm_service.services import scheduled_call_service

router = APIRouter(prefix="/api/v1/scheduled-calls", tags=["scheduled-calls"])


def _as_utc(ts: datetime | None) -> datetime | None:
    # Query strings without an offset are read as UTC
    if ts is not None and ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


@router.get("", response_model=PaginatedResponse[ScheduledCallResponse])
async def list_scheduled_calls(
    principal: CurrentPrincipal,
    uow: UoWDep,
    pagination: PaginationDep,
    customer_id: UUID | None = Query(None, alias="customerId"),
    assignee_id: UUID | None = Query(None, alias="assigneeId"),
    status: ScheduledCallStatus | None = Query(None),
    from_date: datetime | None = Query(None, alias="fromDate"),
    to_date: datetime | None = Query(None, alias="toDate"),
) -> PaginatedResponse[ScheduledCallResponse]:
    filters = ScheduledCallFilterDTO(
        customer_id=customer_id,
        assignee_id=assignee_id,
        status=status,
        from_date=_as_utc(from_date),
        to_date=_as_utc(to_date),
        cursor=pagination.cursor,
        page_size=pagination.page_size,
        sort_order=pagination.sort_order,
    )
    page = await scheduled_call_service.list_scheduled_calls(principal, filters, uow)
    return PaginatedResponse[ScheduledCallResponse].from_page(
        page.map(lambda c: ScheduledCallResponse.model_validate(c, from_attributes=True))
    )
