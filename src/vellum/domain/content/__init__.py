"""Content domain: finder capability and content-object errors."""

from vellum.domain.content.exceptions import (
    ContentObjectClassNotFoundError,
    InvalidContentObjectClassError,
    UnknownFieldError,
)
from vellum.domain.content.finder import ContentObjectFinder, FieldFinder

__all__ = [
    "ContentObjectClassNotFoundError",
    "ContentObjectFinder",
    "FieldFinder",
    "InvalidContentObjectClassError",
    "UnknownFieldError",
]
