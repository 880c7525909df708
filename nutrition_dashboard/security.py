from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import APIKeyHeader

from .errors import ProblemError
from .settings import Settings, get_settings

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    if not x_api_key or x_api_key != settings.api_key:
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


def require_actor_id(
    x_actor_member_id: str | None = Header(
        None,
        alias="x-actor-member-id",
        description="Member id of the authenticated actor, asserted by the gateway.",
    ),
) -> str:
    """Return the acting member id or reject the request as unauthenticated."""
    actor_id = (x_actor_member_id or "").strip()
    if not actor_id:
        raise ProblemError(401, "Unauthorized", "Actor member id header required")
    return actor_id


__all__ = ["api_key_header", "require_actor_id", "verify_api_key"]
