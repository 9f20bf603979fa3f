from __future__ import annotations

from dataclasses import dataclass

from crm_service.application.pagination.cursor import CursorPosition
from crm_service.domain.value_objects.enums import SortDirection


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Decoded pagination input handed to repositories."""

    position: CursorPosition | None
    page_size: int
    direction: SortDirection = SortDirection.DESC

    @property
    def fetch_limit(self) -> int:
        # One lookahead row to detect a next page
        return self.page_size + 1
