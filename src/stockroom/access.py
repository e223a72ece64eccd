"""Actors and role checks for stockroom operations."""

from dataclasses import dataclass
from enum import Enum

from stockroom.errors import PermissionDeniedError


class Role(Enum):
    ADMIN = "admin"
    MANAGER = "manager"


CATALOGUE_EDITORS = (Role.ADMIN, Role.MANAGER)


@dataclass(frozen=True)
class Actor:
    """The authenticated user behind a request.

    ``role`` is kept as the raw string; anything other than admin or manager
    is an ordinary user.
    """

    id: str
    role: str

    def has_role(self, *roles: Role) -> bool:
        return self.role in {r.value for r in roles}


def require_role(actor: Actor, *roles: Role) -> None:
    if actor.has_role(*roles):
        return

    if set(roles) == set(CATALOGUE_EDITORS):
        raise PermissionDeniedError("Access denied. Admin or Manager role required.")
    names = " or ".join(r.value.capitalize() for r in roles)
    raise PermissionDeniedError(f"Access denied. {names} role required.")
