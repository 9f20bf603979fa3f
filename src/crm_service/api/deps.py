"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from crm_service.api.v1.schemas.common import CursorPaginationParams
from crm_service.application.dto.principal import Principal
from crm_service.application.ports.auth import TokenVerifier
from crm_service.config import settings
from crm_service.infrastructure.auth.hs256_verifier import HS256Verifier
from crm_service.infrastructure.auth.jwks_verifier import JWKSVerifier
from crm_service.infrastructure.db.session import AsyncSessionLocal
from crm_service.infrastructure.db.uow import SqlAlchemyUoW

_bearer_scheme = HTTPBearer()


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUoW(session) as uow:
            yield uow


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def _get_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        assert settings.JWKS_URL, "JWKS_URL must be set when JWT_VERIFY_MODE=jwks"
        return JWKSVerifier(settings.JWKS_URL)
    return HS256Verifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _get_verifier()
    return _verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_bearer_scheme)],
) -> Principal:
    verifier = get_verifier()
    try:
        return await verifier.verify(credentials.credentials)
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


def get_pagination_params(
    cursor: str | None = Query(None, description="Opaque cursor from a previous page"),
    page_size: str | None = Query(None, alias="pageSize", description="1-100, default 20"),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc or desc"),
) -> CursorPaginationParams:
    """Validate pagination query parameters through CursorPaginationParams.

    Raw strings are taken from the query so the model is the only rule set;
    failures surface as a regular 422 before any storage access.
    """
    raw = {"cursor": cursor, "pageSize": page_size, "sortOrder": sort_order}
    try:
        return CursorPaginationParams.model_validate(
            {k: v for k, v in raw.items() if v is not None}
        )
    except PydanticValidationError as exc:
        errors = [
            {**err, "loc": ("query", *err["loc"])}
            for err in exc.errors(include_url=False, include_context=False)
        ]
        raise RequestValidationError(errors) from exc


PaginationDep = Annotated[CursorPaginationParams, Depends(get_pagination_params)]
