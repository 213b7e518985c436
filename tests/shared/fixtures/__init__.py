"""Shared pytest fixtures for all test packages."""

from tests.shared.fixtures.content_objects import (
    ArticleObject,
    MemberObject,
    StaffUserObject,
)
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
)
from tests.shared.fixtures.factories import TestUserFactory

__all__ = [
    "ArticleObject",
    "MemberObject",
    "StaffUserObject",
    "TestUserFactory",
    "async_engine",
    "db_session",
    "postgres_container",
]
