"""SQLAlchemy implementation of ContentObjectFinder."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vellum.domain.content import ContentObjectFinder, UnknownFieldError
from vellum.domain.content.finder import FindResult
from vellum.infrastructure.persistence.sqlalchemy.models import ContentObject

logger = logging.getLogger(__name__)


class ContentObjectFinderSQLAlchemy(ContentObjectFinder):
    """SQLAlchemy implementation of the ContentObjectFinder interface.

    Field lookups only return published objects. Lookups by ID return the
    object regardless of its published state and always reload it from the
    database, so callers see the current stored state.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(
        self,
        entity_type: type[ContentObject],
        object_id: UUID,
    ) -> ContentObject | None:
        return await self._session.get(
            entity_type,
            object_id,
            populate_existing=True,
        )

    async def find_by_field(
        self,
        entity_type: type[ContentObject],
        field: str,
        value: Any,
        limit: int | None = None,
        offset: int = 0,
    ) -> FindResult:
        if not entity_type.has_field(field):
            raise UnknownFieldError(entity_type.__qualname__, field)

        column = getattr(entity_type, field)
        stmt = (
            select(entity_type)
            .where(column == value)
            .where(entity_type.published.is_(True))
            .order_by(entity_type.created_at, entity_type.id)
        )
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)

        if limit == 1:
            found = result.scalars().first()
            logger.debug(
                "Lookup %s.%s=%r: %s",
                entity_type.__name__,
                field,
                value,
                "found" if found is not None else "no match",
            )
            return found

        objects = list(result.scalars().all())
        logger.debug(
            "Lookup %s.%s=%r: %d match(es)",
            entity_type.__name__,
            field,
            value,
            len(objects),
        )
        return objects
