"""User provider interface."""

from abc import ABC, abstractmethod
from typing import Any


class UserProvider(ABC):
    """Loads users for the authentication layer."""

    @abstractmethod
    async def load_user_by_identifier(self, identifier: str) -> Any:
        """Load the user for an identifier (e.g. a typed username).

        Raises EntityNotFoundError if there is no such user.
        """

    @abstractmethod
    async def refresh_user(self, user: Any) -> Any:
        """Reload a previously loaded user.

        Raises UnsupportedEntityError if the user is not managed by
        this provider.
        """

    @abstractmethod
    def supports_class(self, cls: type) -> bool:
        """Check whether this provider manages users of the given class."""
