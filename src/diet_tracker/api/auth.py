"""Bearer token authentication for API routes."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import jwt
from fastapi import Depends, Header, Request

from diet_tracker.config import Settings  # noqa: TC001
from diet_tracker.domain.errors import AuthContextError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer


def create_access_token(
    user_id: int,
    secret: str,
    algorithm: str = "HS256",
    ttl: timedelta = timedelta(hours=12),
) -> str:
    """Issue a signed token whose subject is the account id."""
    now = datetime.now(tz=UTC)
    payload = {"sub": str(user_id), "iat": now, "exp": now + ttl}
    return jwt.encode(payload, secret, algorithm=algorithm)


def _get_settings(request: Request) -> Settings:
    container: AppContainer = request.app.state.container
    return container.settings


async def current_user_id(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(_get_settings),
) -> int:
    """Return the authenticated account id for the request."""
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthContextError(
            "While getting UserID from request context: missing bearer token"
        )
    token = authorization.split(" ", 1)[1]
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.PyJWTError as exc:
        raise AuthContextError(
            f"While getting UserID from request context: {exc}"
        ) from exc
    subject = str(payload.get("sub", ""))
    if not (subject.isascii() and subject.isdecimal()):
        raise AuthContextError(
            "While getting UserID from request context: invalid subject"
        )
    return int(subject)
