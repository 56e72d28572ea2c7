"""
Engagement Entity Models

Per-user reactions to a comic:

    Like          ← user liked the comic (unique per user + comic)
    PendingEntry  ← comic is on the user's want-to-read list (unique per user + comic)
    Comment       ← free text with an optional 1..5 rating

SAMPLE COMMENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ user_id          │ 12                                                        │
│ comic_id         │ 42                                                        │
│ text             │ "Gran arco argumental"                                    │
│ rating           │ 5 (NULL when not rated)                                   │
│ created_at       │ 2026-10-19T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from heroflicks.shared.models.base import Base, CreatedAtMixin


class Like(Base, CreatedAtMixin):
    """A user's like on a comic."""

    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("user_id", "comic_id", name="uq_likes_user_comic"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    comic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comics.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Like(user_id={self.user_id}, comic_id={self.comic_id})>"


class PendingEntry(Base, CreatedAtMixin):
    """A comic the user wants to read later."""

    __tablename__ = "pending_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "comic_id", name="uq_pending_entries_user_comic"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    comic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comics.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<PendingEntry(user_id={self.user_id}, comic_id={self.comic_id})>"


class Comment(Base, CreatedAtMixin):
    """
    Comment model.

    Attributes:
        text: Comment body (required)
        rating: Optional score, 1..5 inclusive
    """

    __tablename__ = "comments"
    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 5)", name="rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    comic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comics.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    text: Mapped[str] = mapped_column(Text, nullable=False)

    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, comic_id={self.comic_id}, rating={self.rating})>"
