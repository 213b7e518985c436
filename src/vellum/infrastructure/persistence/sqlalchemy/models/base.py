"""SQLAlchemy base configuration."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Uuid, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from vellum.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """Base class for all database models."""


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


class ContentObject(Base, TimestampMixin):
    """Base capability shared by every content-object class.

    Has no table of its own. Concrete subclasses declare ``__tablename__``
    and their fields; every mapped column becomes a lookup field for
    ``ContentObjectFinder.find_by_field``.
    """

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        mapper = inspect(cls, raiseerr=False)
        if mapper is None:
            # abstract intermediate class, nothing mapped
            return frozenset()
        return frozenset(attr.key for attr in mapper.column_attrs)

    @classmethod
    def has_field(cls, name: str) -> bool:
        return name in cls.field_names()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
