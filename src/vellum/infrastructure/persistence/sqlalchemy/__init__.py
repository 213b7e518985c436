"""SQLAlchemy implementation for vellum persistence.

Provides:
- Base: Declarative base for all models
- ContentObject: Abstract base capability shared by all content objects
- UserObject: Stock content-object class representing users
- ContentObjectRegistry: Explicit name -> class registry
- ContentObjectFinderSQLAlchemy: Finder implementation
"""

from vellum.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ContentObject,
    TimestampMixin,
    UserObject,
)
from vellum.infrastructure.persistence.sqlalchemy.registry import (
    ContentObjectRegistry,
    default_registry,
)
from vellum.infrastructure.persistence.sqlalchemy.repositories import (
    ContentObjectFinderSQLAlchemy,
)

__all__ = [
    "Base",
    "ContentObject",
    "ContentObjectFinderSQLAlchemy",
    "ContentObjectRegistry",
    "TimestampMixin",
    "UserObject",
    "default_registry",
]
