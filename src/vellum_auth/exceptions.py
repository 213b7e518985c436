"""User provider exceptions.

Configuration errors are raised once, when a provider is built, and are
fatal. Lookup errors are raised per call and should be translated into an
authentication failure by the caller.
"""


class ConfigurationError(ValueError):
    """Raised when a user provider is configured with an unusable class or field."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(AuthError):
    """Raised when no user matches the given identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"User {identifier} was not found")


class UnsupportedEntityError(AuthError):
    """Raised when a provider is asked to refresh a user it does not manage."""

    def __init__(self, message: str = "Unsupported user instance"):
        super().__init__(message)
