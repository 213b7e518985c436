"""Vellum - Content-object persistence layer.

Content objects are typed, persisted records (users, pages, products...)
that share a common base capability (``ContentObject``) and can be looked
up by id or by any of their mapped fields through a ``ContentObjectFinder``.

Architecture:
    vellum/
    ├── domain/
    │   ├── content/        # Finder interface and content exceptions
    │   └── shared/         # Time helpers
    └── infrastructure/
        └── persistence/
            └── sqlalchemy/ # Models, registry, finder implementation
"""

from vellum.domain.content import (
    ContentObjectClassNotFoundError,
    ContentObjectFinder,
    FieldFinder,
    InvalidContentObjectClassError,
    UnknownFieldError,
)
from vellum.infrastructure.persistence.sqlalchemy import (
    Base,
    ContentObject,
    ContentObjectFinderSQLAlchemy,
    ContentObjectRegistry,
    UserObject,
    default_registry,
)

__all__ = [
    # Domain
    "ContentObjectFinder",
    "FieldFinder",
    # Exceptions
    "ContentObjectClassNotFoundError",
    "InvalidContentObjectClassError",
    "UnknownFieldError",
    # Persistence
    "Base",
    "ContentObject",
    "ContentObjectFinderSQLAlchemy",
    "ContentObjectRegistry",
    "UserObject",
    "default_registry",
]
