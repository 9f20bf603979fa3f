from __future__ import annotations

from crm_service.domain.entities.customer import Customer
from crm_service.infrastructure.db.models.customer import CustomerModel


def model_to_entity(model: CustomerModel) -> Customer:
    return Customer(
        id=model.id,
        organization_id=model.organization_id,
        customer_code=model.customer_code,
        name=model.name,
        status=model.status,
        type=model.type,
        size=model.size,
        industry=model.industry,
        email=model.email,
        phone=model.phone,
        health_score=model.health_score,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
