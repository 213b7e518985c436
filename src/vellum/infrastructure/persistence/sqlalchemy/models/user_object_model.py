"""SQLAlchemy model for the stock user content object."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from vellum.infrastructure.persistence.sqlalchemy.models.base import ContentObject
from vellum.infrastructure.persistence.sqlalchemy.registry import default_registry

DEFAULT_ROLE = "ROLE_USER"


@default_registry.register
class UserObject(ContentObject):
    """Content object representing a user who can sign in.

    Applications with extra user data subclass this (or ContentObject
    directly) and point the user provider at their own class.
    """

    __tablename__ = "user_objects"

    username: Mapped[str] = mapped_column(
        String(190),
        unique=True,
        nullable=False,
        index=True,
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    roles: Mapped[str] = mapped_column(
        String(255),
        default=DEFAULT_ROLE,
        nullable=False,
    )

    @property
    def user_identifier(self) -> str:
        return self.username

    @property
    def role_list(self) -> list[str]:
        return [role.strip() for role in self.roles.split(",") if role.strip()]

    @classmethod
    def create(
        cls,
        username: str,
        email: str | None = None,
        roles: Iterable[str] = (DEFAULT_ROLE,),
        published: bool = True,
    ) -> UserObject:
        return cls(
            id=uuid4(),
            username=username,
            email=email,
            roles=",".join(roles),
            published=published,
        )

    def __repr__(self) -> str:
        return f"<UserObject(id={self.id}, username={self.username})>"
