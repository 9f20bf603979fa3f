"""Import all models so Alembic can discover them via Base.metadata."""
from crm_service.infrastructure.db.models.customer import CustomerModel
from crm_service.infrastructure.db.models.order import OrderModel
from crm_service.infrastructure.db.models.scheduled_call import ScheduledCallModel

__all__ = [
    "CustomerModel",
    "OrderModel",
    "ScheduledCallModel",
]
