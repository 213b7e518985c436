"""Content object finder interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union
from uuid import UUID

from vellum.domain.content.exceptions import UnknownFieldError

if TYPE_CHECKING:
    from vellum.infrastructure.persistence.sqlalchemy.models import ContentObject

FindResult = Union["ContentObject", list["ContentObject"], None]

# Called as finder(value, limit=None, offset=0)
FieldFinder = Callable[..., Awaitable[FindResult]]


class ContentObjectFinder(ABC):
    """Lookup capability for content objects.

    Field lookups follow the limit convention of the content store: a limit
    of exactly 1 returns a single object (or None), anything else returns a
    list.
    """

    @abstractmethod
    async def find_by_id(
        self,
        entity_type: type[ContentObject],
        object_id: UUID,
    ) -> Optional[ContentObject]:
        """Find a content object of the given class by its ID."""

    @abstractmethod
    async def find_by_field(
        self,
        entity_type: type[ContentObject],
        field: str,
        value: Any,
        limit: int | None = None,
        offset: int = 0,
    ) -> FindResult:
        """Find content objects of the given class whose field equals value."""

    def finder_for(self, entity_type: type[ContentObject], field: str) -> FieldFinder:
        """Return a lookup bound to one class and field.

        Raises UnknownFieldError if the field is not mapped on the class.
        """
        if not entity_type.has_field(field):
            raise UnknownFieldError(entity_type.__qualname__, field)
        return partial(self.find_by_field, entity_type, field)
