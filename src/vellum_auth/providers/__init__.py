"""User provider contract and the content-object implementation."""

from vellum_auth.providers.object_user_provider import ObjectUserProvider
from vellum_auth.providers.user_provider import UserProvider

__all__ = [
    "ObjectUserProvider",
    "UserProvider",
]
