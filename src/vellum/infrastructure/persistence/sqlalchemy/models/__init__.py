# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for content objects."""

from vellum.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    ContentObject,
    TimestampMixin,
)
from vellum.infrastructure.persistence.sqlalchemy.models.user_object_model import (
    UserObject,
)

__all__ = [
    "Base",
    "ContentObject",
    "TimestampMixin",
    "UserObject",
]
