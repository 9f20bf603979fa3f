from __future__ import annotations

from crm_service.application.dto.principal import Principal
from crm_service.application.dto.scheduled_call import ScheduledCallFilterDTO
from crm_service.application.exceptions import ValidationError
from crm_service.application.pagination.page import CursorPage
from crm_service.application.pagination.request import resolve_page_request
from crm_service.application.uow import UnitOfWork
from crm_service.config import settings
from crm_service.domain.entities.scheduled_call import ScheduledCall


async def list_scheduled_calls(
    principal: Principal,
    filters: ScheduledCallFilterDTO,
    uow: UnitOfWork,
) -> CursorPage[ScheduledCall]:
    if (
        filters.from_date is not None
        and filters.to_date is not None
        and filters.from_date > filters.to_date
    ):
        raise ValidationError("fromDate must not be after toDate")

    page = resolve_page_request(
        filters.cursor,
        filters.page_size,
        filters.sort_order,
        strict=settings.PAGINATION_STRICT_CURSOR,
    )
    return await uow.scheduled_calls.list_page(principal.organization_id, filters, page)
