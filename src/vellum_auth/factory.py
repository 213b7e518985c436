"""Build the configured user provider from application settings."""

from __future__ import annotations

import logging

from vellum.domain.content import ContentObjectFinder
from vellum.infrastructure.persistence.sqlalchemy import ContentObjectRegistry
from vellum_auth.providers import ObjectUserProvider
from vellum_config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_user_provider(
    finder: ContentObjectFinder,
    settings: Settings | None = None,
    registry: ContentObjectRegistry | None = None,
) -> ObjectUserProvider:
    """Create the ObjectUserProvider described by the settings.

    Uses USER_PROVIDER_CLASS and USER_PROVIDER_USERNAME_FIELD. Raises
    ConfigurationError if they do not describe a usable user class.
    """
    settings = settings or get_settings()

    provider = ObjectUserProvider(
        settings.user_provider_class,
        finder,
        username_field=settings.user_provider_username_field,
        registry=registry,
    )
    logger.debug(
        "Using %s users looked up by %s",
        provider.entity_type.__qualname__,
        provider.username_field,
    )
    return provider
