# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for content objects."""

from vellum.infrastructure.persistence.sqlalchemy.repositories.content_object_finder import (
    ContentObjectFinderSQLAlchemy,
)

__all__ = [
    "ContentObjectFinderSQLAlchemy",
]
