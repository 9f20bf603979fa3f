from __future__ import annotations

from typing import Protocol
from uuid import UUID

from crm_service.application.dto.customer import CustomerFilterDTO
from crm_service.application.dto.pagination import PageRequest
from crm_service.application.pagination.page import CursorPage
from crm_service.domain.entities.customer import Customer


class CustomerReader(Protocol):
    async def get_by_id(self, organization_id: UUID, customer_id: UUID) -> Customer | None: ...

    async def list_page(
        self,
        organization_id: UUID,
        filters: CustomerFilterDTO,
        page: PageRequest,
    ) -> CursorPage[Customer]: ...
