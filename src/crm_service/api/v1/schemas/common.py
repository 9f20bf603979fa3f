from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from crm_service.application.pagination.page import CursorPage
from crm_service.application.pagination.request import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)
from crm_service.domain.value_objects.enums import SortDirection

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CursorPaginationParams(ApiModel):
    cursor: str | None = None
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE)
    sort_order: SortDirection = SortDirection.DESC

    model_config = ConfigDict(extra="forbid")


class PaginatedResponse(ApiModel, Generic[T]):
    items: list[T]  # type: ignore[type-var]
    next_cursor: str | None = None
    has_next_page: bool = False

    @classmethod
    def from_page(cls, page: CursorPage[Any]) -> Self:
        return cls(
            items=page.items,
            next_cursor=page.next_cursor,
            has_next_page=page.has_next_page,
        )
