from __future__ import annotations

from typing import Protocol
from uuid import UUID

from crm_service.application.dto.order import OrderFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.pagination.page import CursorPage
from crm_service.domain.entities.order import Order


class OrderReader(Protocol):
    async def get_by_id(self, organization_id: UUID, order_id: UUID) -> Order | None: ...

    async def list_page(
        self,
        organization_id: UUID,
        filters: OrderFilterDTO,
        page: PageRequest,
    ) -> CursorPage[Order]: ...
