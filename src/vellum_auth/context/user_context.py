"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from vellum.infrastructure.persistence.sqlalchemy import ContentObject


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: UUID
    identifier: str
    roles: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, user: ContentObject, username_field: str = "username") -> UserContext:
        """Build a context from a loaded user object.

        Roles are taken from the object's ``role_list`` when it has one.
        """
        roles = getattr(user, "role_list", ())
        return cls(
            user_id=user.id,
            identifier=str(getattr(user, username_field)),
            roles=tuple(roles),
        )

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def __str__(self) -> str:
        return f"UserContext({self.identifier})"
