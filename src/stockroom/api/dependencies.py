"""Request-scoped dependencies shared by the stockroom routers."""

import os

from fastapi import Header, Query

from stockroom.access import Actor
from stockroom.errors import AuthenticationRequiredError


def current_actor(
    x_user_id: str | None = Header(None),
    x_user_role: str | None = Header(None),
) -> Actor:
    """Resolve the caller from the identity headers set by the gateway."""
    if not x_user_id or not x_user_role:
        raise AuthenticationRequiredError("Authentication required")
    return Actor(id=x_user_id, role=x_user_role.strip().lower())


def page_limit(limit: int | None = Query(None, ge=1)) -> int:
    default = int(os.environ.get("DEFAULT_PAGE_LIMIT", "10"))
    ceiling = int(os.environ.get("MAX_PAGE_LIMIT", "100"))
    return min(limit or default, ceiling)
