from __future__ import annotations

from crm_service.domain.entities.order import Order
from crm_service.infrastructure.db.models.order import OrderModel


def model_to_entity(model: OrderModel) -> Order:
    return Order(
        id=model.id,
        organization_id=model.organization_id,
        order_number=model.order_number,
        customer_id=model.customer_id,
        status=model.status,
        payment_status=model.payment_status,
        order_date=model.order_date,
        due_date=model.due_date,
        total=model.total,
        metadata=model.metadata_,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
