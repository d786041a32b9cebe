"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from core.timestamps import utcnow


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class StorageItemModel(Base):
    """One key of the durable key-value namespace.

    ``version`` is bumped on every write so that other sessions can tell
    the row changed underneath them.
    """

    __tablename__ = "storage_items"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )
