"""Vellum Auth - User provider for content objects.

This package connects the authentication layer to the content-object
store. It handles:
- Loading users by identifier (username, email, ...)
- Refreshing previously loaded users
- Deciding which user classes a provider is responsible for

Password checks, sessions and tokens are not handled here; they belong to
the authentication layer that calls the provider.

Usage:
    from vellum import ContentObjectFinderSQLAlchemy
    from vellum_auth import ObjectUserProvider

    provider = ObjectUserProvider(
        "UserObject",
        ContentObjectFinderSQLAlchemy(session),
    )
    user = await provider.load_user_by_identifier("alice")
"""

from vellum_auth.context import UserContext
from vellum_auth.exceptions import (
    AuthError,
    ConfigurationError,
    EntityNotFoundError,
    UnsupportedEntityError,
)
from vellum_auth.factory import create_user_provider
from vellum_auth.providers import ObjectUserProvider, UserProvider

__all__ = [
    # Providers
    "ObjectUserProvider",
    "UserProvider",
    "create_user_provider",
    # Context
    "UserContext",
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "EntityNotFoundError",
    "UnsupportedEntityError",
]
