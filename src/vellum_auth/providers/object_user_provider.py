"""User provider backed by content objects."""

from __future__ import annotations

import logging
from typing import Optional

from vellum.domain.content import (
    ContentObjectClassNotFoundError,
    ContentObjectFinder,
    UnknownFieldError,
)
from vellum.infrastructure.persistence.sqlalchemy import (
    ContentObject,
    ContentObjectRegistry,
    default_registry,
)
from vellum.infrastructure.persistence.sqlalchemy.registry import (
    is_content_object_class,
)
from vellum_auth.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    UnsupportedEntityError,
)
from vellum_auth.providers.user_provider import UserProvider

logger = logging.getLogger(__name__)


class ObjectUserProvider(UserProvider):
    """
    User provider loading users from content objects.

    To load users, the provider needs to know which content-object class
    represents users (entity_type) and which of its fields holds the
    username (username_field). The class may be given directly or by a
    name known to the registry; unregistered names are imported as
    ``package.module.ClassName``.

    Example:
        provider = ObjectUserProvider(
            "UserObject",
            ContentObjectFinderSQLAlchemy(session),
            username_field="email",
        )
        user = await provider.load_user_by_identifier("jane@example.com")
    """

    def __init__(
        self,
        entity_type: str | type[ContentObject] | None,
        finder: ContentObjectFinder,
        username_field: str = "username",
        registry: ContentObjectRegistry | None = None,
    ):
        self._entity_type = self._resolve_entity_type(
            entity_type,
            registry or default_registry,
        )
        self._username_field = username_field
        self._finder = finder

        try:
            self._find_by_username = finder.finder_for(
                self._entity_type,
                username_field,
            )
        except UnknownFieldError as e:
            raise ConfigurationError(
                f"User class {self._entity_type.__qualname__} has no field "
                f"{username_field!r} to look up usernames",
            ) from e

        logger.debug(
            "User provider configured for %s by %s",
            self._entity_type.__qualname__,
            username_field,
        )

    @property
    def entity_type(self) -> type[ContentObject]:
        return self._entity_type

    @property
    def username_field(self) -> str:
        return self._username_field

    @staticmethod
    def _resolve_entity_type(
        entity_type: str | type | None,
        registry: ContentObjectRegistry,
    ) -> type[ContentObject]:
        if not entity_type:
            raise ConfigurationError("Object class name is empty")

        try:
            cls = registry.resolve(entity_type)
        except ContentObjectClassNotFoundError as e:
            raise ConfigurationError(f"User class {entity_type} does not exist") from e

        if not is_content_object_class(cls):
            raise ConfigurationError(
                f"User class {cls.__qualname__} must be a subclass of "
                f"{ContentObject.__qualname__}",
            )

        return cls

    async def load_user_by_identifier(self, identifier: str) -> ContentObject:
        user = await self._find_by_username(identifier, limit=1)
        if user and isinstance(user, self._entity_type):
            return user

        logger.debug(
            "No %s found for %s=%r",
            self._entity_type.__qualname__,
            self._username_field,
            identifier,
        )
        raise EntityNotFoundError(identifier)

    async def refresh_user(self, user: object) -> Optional[ContentObject]:
        if not isinstance(user, self._entity_type) or not isinstance(
            user,
            ContentObject,
        ):
            raise UnsupportedEntityError(
                f"Instances of {type(user).__qualname__} are not supported",
            )

        refreshed = await self._finder.find_by_id(self._entity_type, user.id)
        if refreshed is None:
            # Returned as-is; the caller decides how to treat a vanished user
            logger.warning(
                "%s %s no longer exists",
                self._entity_type.__qualname__,
                user.id,
            )
        return refreshed

    def supports_class(self, cls: type) -> bool:
        return cls is self._entity_type

    def __repr__(self) -> str:
        return (
            f"ObjectUserProvider(entity_type={self._entity_type.__qualname__}, "
            f"username_field={self._username_field!r})"
        )
