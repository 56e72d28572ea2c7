"""
Tag Entity Models

Tag: a named label (e.g. "Acción", "Superhéroes").
ComicTag: association between a comic and a tag.

    Comic ──< comics_tags >── Tag

Both foreign keys cascade, so deleting a comic or a tag removes its
associations. The composite primary key makes an association unique.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from heroflicks.shared.models.base import Base


class Tag(Base):
    """
    Tag model.

    Attributes:
        id: Auto-increment identifier
        name: Unique display name
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"


class ComicTag(Base):
    """Association row between a comic and a tag."""

    __tablename__ = "comics_tags"

    comic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comics.id", ondelete="CASCADE"),
        primary_key=True,
    )

    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ComicTag(comic_id={self.comic_id}, tag_id={self.tag_id})>"
