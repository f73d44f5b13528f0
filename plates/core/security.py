"""Caller identity from the identity provider's bearer tokens.

Sign-in and sessions live with the provider; this module only verifies the
token it issued and exposes who is calling.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import Depends, Header, HTTPException
from jose import ExpiredSignatureError, JWTError, jwt

from plates.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller: provider user id plus sign-up metadata."""

    id: uuid.UUID
    user_metadata: dict[str, Any] = field(default_factory=dict)


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Bearer"})


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.strip().split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def decode_identity_token(token: str, settings: Settings) -> CurrentUser:
    """Verify a provider token and return the caller. Raises 401 on any failure."""
    if not settings.auth_jwt_secret:
        logger.error("AUTH_JWT_SECRET is not configured; rejecting request")
        raise _unauthorized()
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
        )
    except ExpiredSignatureError as exc:
        logger.info("Rejected expired identity token")
        raise _unauthorized() from exc
    except JWTError as exc:
        logger.info("Rejected invalid identity token: %s", exc)
        raise _unauthorized() from exc

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError as exc:
        raise _unauthorized() from exc
    return CurrentUser(id=user_id, user_metadata=payload.get("user_metadata") or {})


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """Dependency: the verified caller, or 401."""
    token = _extract_bearer_token(authorization)
    if not token:
        raise _unauthorized()
    return decode_identity_token(token, settings)
