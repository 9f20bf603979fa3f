from __future__ import annotations

from crm_service.domain.entities.scheduled_call import ScheduledCall
from crm_service.infrastructure.db.models.scheduled_call import ScheduledCallModel


def model_to_entity(model: ScheduledCallModel) -> ScheduledCall:
    return ScheduledCall(
        id=model.id,
        organization_id=model.organization_id,
        customer_id=model.customer_id,
        assignee_id=model.assignee_id,
        scheduled_at=model.scheduled_at,
        reminder_at=model.reminder_at,
        purpose=model.purpose,
        notes=model.notes,
        status=model.status,
        created_at=model.created_at,
    )
