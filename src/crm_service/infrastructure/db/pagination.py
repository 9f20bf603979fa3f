"""Keyset conditions over a composite (timestamp, id) sort key.

Rows are totally ordered by ``(ts, id)``, with ``id`` breaking ties between rows
sharing a timestamp. The condition and the ORDER BY produced here must always be
used together, which ``paginate_select`` does.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select
from sqlalchemy.orm import InstrumentedAttribute

from crm_service.application.dto.pagination import PageRequest
from crm_service.application.pagination.cursor import CursorPosition
from crm_service.domain.value_objects.enums import SortDirection

Column = InstrumentedAttribute[Any] | ColumnElement[Any]


def build_cursor_condition(
    ts_col: Column,
    id_col: Column,
    position: CursorPosition,
    direction: SortDirection,
) -> ColumnElement[bool]:
    """Select rows strictly after ``position`` in ``direction`` traversal order."""
    ts = position.created_at_value()
    uid = position.id_value()
    if direction == SortDirection.DESC:
        return (ts_col < ts) | ((ts_col == ts) & (id_col < uid))
    if direction == SortDirection.ASC:
        return (ts_col > ts) | ((ts_col == ts) & (id_col > uid))
    raise ValueError(f"Unknown sort direction: {direction!r}")


def cursor_order_by(
    ts_col: Column,
    id_col: Column,
    direction: SortDirection,
) -> tuple[ColumnElement[Any], ColumnElement[Any]]:
    if direction == SortDirection.DESC:
        return ts_col.desc(), id_col.desc()
    if direction == SortDirection.ASC:
        return ts_col.asc(), id_col.asc()
    raise ValueError(f"Unknown sort direction: {direction!r}")


def paginate_select(
    stmt: Select[Any],
    ts_col: Column,
    id_col: Column,
    page: PageRequest,
) -> Select[Any]:
    """Apply cursor condition, matching order and the N+1 lookahead limit."""
    if page.position is not None:
        stmt = stmt.where(build_cursor_condition(ts_col, id_col, page.position, page.direction))
    return stmt.order_by(*cursor_order_by(ts_col, id_col, page.direction)).limit(page.fetch_limit)
