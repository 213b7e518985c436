"""Registry of content-object classes.

Content-object classes are registered under a short name (the class name by
default). Names that are not registered are treated as import paths, either
``package.module.ClassName`` or ``package.module:ClassName``, so that
plugin packages can provide their own classes without registering them.
"""

from __future__ import annotations

import importlib
import logging
from typing import Union

from vellum.domain.content.exceptions import (
    ContentObjectClassNotFoundError,
    InvalidContentObjectClassError,
)
from vellum.infrastructure.persistence.sqlalchemy.models.base import ContentObject

logger = logging.getLogger(__name__)


def is_content_object_class(cls: object) -> bool:
    """Check that cls is a strict subclass of ContentObject."""
    return (
        isinstance(cls, type)
        and issubclass(cls, ContentObject)
        and cls is not ContentObject
    )


class ContentObjectRegistry:
    """Explicit mapping of names to content-object classes."""

    def __init__(self) -> None:
        self._classes: dict[str, type[ContentObject]] = {}

    def register(
        self,
        cls: type[ContentObject],
        name: str | None = None,
    ) -> type[ContentObject]:
        """Register a class; returns it so this can be used as a decorator."""
        if not is_content_object_class(cls):
            raise InvalidContentObjectClassError(cls)

        key = name or cls.__name__
        existing = self._classes.get(key)
        if existing is not None and existing is not cls:
            logger.warning(
                "Content object name %s re-registered: %s replaces %s",
                key,
                cls.__qualname__,
                existing.__qualname__,
            )
        self._classes[key] = cls
        return cls

    def get(self, name: str) -> type[ContentObject] | None:
        return self._classes.get(name)

    def names(self) -> list[str]:
        return sorted(self._classes)

    def resolve(self, name_or_type: Union[str, type]) -> type:
        """Resolve a class name (or pass a class through).

        Only resolves; callers decide whether the result is an acceptable
        content-object class.
        """
        if isinstance(name_or_type, type):
            return name_or_type

        registered = self._classes.get(name_or_type)
        if registered is not None:
            return registered

        return self._import(name_or_type)

    def _import(self, path: str) -> type:
        if ":" in path:
            module_name, _, attr = path.partition(":")
        else:
            module_name, _, attr = path.rpartition(".")

        if not module_name or not attr:
            raise ContentObjectClassNotFoundError(path)

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise ContentObjectClassNotFoundError(path) from e

        cls = getattr(module, attr, None)
        if not isinstance(cls, type):
            raise ContentObjectClassNotFoundError(path)

        logger.debug("Resolved content object class %s by import path", path)
        return cls

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)


default_registry = ContentObjectRegistry()
