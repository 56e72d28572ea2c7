"""
Base Model Classes

Foundational classes for all SQLAlchemy models in HeroFlicks: the declarative
base and the timestamp mixins.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── CreatedAtMixin   ← created_at only (comics, likes, comments, ...)
       │
       └── TimestampMixin   ← created_at + updated_at (users, user lists)

Usage:
======
    from heroflicks.shared.models.base import Base, CreatedAtMixin

    class Like(Base, CreatedAtMixin):
        __tablename__ = "likes"
        id: Mapped[int] = mapped_column(Integer, primary_key=True)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, MetaData, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Deterministic constraint names keep Alembic autogenerate diffs stable
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either directly
    or together with one of the timestamp mixins.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class CreatedAtMixin:
    """
    Adds a creation timestamp.

    The Python-side default keeps sub-second precision on every backend;
    server_default covers rows inserted outside the ORM (seed data, raw SQL).
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin that adds automatic created_at/updated_at tracking.

    Database Behavior:
    ==================
    - created_at: Set on INSERT
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
