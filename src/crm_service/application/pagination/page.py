"""Assembling a page from a lookahead fetch.

Repositories fetch ``page_size + 1`` rows ordered by the same ``(timestamp, id)``
key the cursor condition uses. The extra row only signals that another page
exists and is never returned.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from operator import attrgetter
from typing import Any, Callable, Generic, Sequence, TypeVar
from uuid import UUID

from crm_service.application.pagination.cursor import encode_cursor

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class CursorPage(Generic[T]):
    items: list[T]
    next_cursor: str | None
    has_next_page: bool

    def map(self, fn: Callable[[T], U]) -> CursorPage[U]:
        return CursorPage(
            items=[fn(item) for item in self.items],
            next_cursor=self.next_cursor,
            has_next_page=self.has_next_page,
        )


def build_cursor_response(
    results: Sequence[T],
    page_size: int,
    get_created_at: Callable[[T], datetime | str],
    get_id: Callable[[T], UUID | str],
) -> CursorPage[T]:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    has_next_page = len(results) > page_size
    items = list(results[:page_size])

    next_cursor = None
    if has_next_page:
        last = items[-1]
        next_cursor = encode_cursor(get_created_at(last), get_id(last))

    return CursorPage(items=items, next_cursor=next_cursor, has_next_page=has_next_page)


_created_at = attrgetter("created_at")
_id = attrgetter("id")


def build_standard_cursor_response(results: Sequence[Any], page_size: int) -> CursorPage[Any]:
    """Variant for items exposing ``created_at`` and ``id`` attributes."""
    return build_cursor_response(results, page_size, _created_at, _id)
