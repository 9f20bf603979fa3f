from __future__ import annotations

import logging

from crm_service.application.dto.pagination import PageRequest
from crm_service.application.exceptions import ValidationError
from crm_service.application.pagination.cursor import decode_cursor
from crm_service.domain.value_objects.enums import SortDirection

logger = logging.getLogger(__name__)

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20


def resolve_page_request(
    cursor: str | None,
    page_size: int,
    sort_order: SortDirection,
    *,
    strict: bool = False,
) -> PageRequest:
    """Turn validated pagination input into a PageRequest for a repository.

    A cursor that fails to decode restarts the traversal from the first page,
    or raises ValidationError when ``strict`` is set.
    """
    if not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        raise ValidationError(
            f"pageSize must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}"
        )

    position = None
    if cursor:
        position = decode_cursor(cursor)
        if position is None:
            if strict:
                raise ValidationError("Invalid cursor")
            logger.warning("Ignoring invalid cursor, starting from the first page")

    return PageRequest(
        position=position,
        page_size=page_size,
        direction=SortDirection(sort_order),
    )
