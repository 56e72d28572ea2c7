"""
UserList Entity Models

Custom named lists owned by a user, typed as "pending" or "liked".

    User ──< user_lists ──< user_list_comics >── Comic

A list name is unique per (user, type). Membership rows cascade with both
the list and the comic.
"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from heroflicks.shared.models.base import Base, TimestampMixin, utcnow
from heroflicks.shared.models.enums import ListType, enum_values


class UserList(Base, TimestampMixin):
    """
    UserList model.

    Attributes:
        id: Auto-increment identifier
        user_id: Owner of the list
        list_name: Display name
        list_type: pending | liked
    """

    __tablename__ = "user_lists"
    __table_args__ = (
        UniqueConstraint("user_id", "list_name", "list_type", name="uq_user_lists_user_name_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    list_name: Mapped[str] = mapped_column(String(100), nullable=False)

    list_type: Mapped[ListType] = mapped_column(
        SQLEnum(ListType, name="list_type", values_callable=enum_values, validate_strings=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserList(id={self.id}, name={self.list_name}, type={self.list_type})>"


class UserListComic(Base):
    """Membership of a comic in a user list."""

    __tablename__ = "user_list_comics"

    list_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_lists.id", ondelete="CASCADE"),
        primary_key=True,
    )

    comic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comics.id", ondelete="CASCADE"),
        primary_key=True,
    )

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )
