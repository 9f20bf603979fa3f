from __future__ import annotations

from typing import Any
from uuid import UUID

from crm_service.application.dto.principal import Principal


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    """Build a Principal from decoded JWT claims.

    Tokens without an organization claim are rejected: every query is tenant scoped.
    """
    org_raw = payload.get("org_id", payload.get("organization_id"))
    if not org_raw:
        raise ValueError("Token has no organization claim")
    return Principal(
        user_id=UUID(payload["sub"]),
        organization_id=UUID(org_raw),
    )
