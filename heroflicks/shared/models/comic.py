"""
Comic Entity Model

A comic in the catalog: metadata plus the paths of its PDF and cover.

Like and comment counts are never stored here; they are derived at query
time by ComicRepository.

SAMPLE COMIC RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ title            │ "Amazing Spider-Man #1"                                   │
│ editorial        │ "Marvel"                                                  │
│ pdf_path         │ "public/comics/asm1-1760869800000-123456789.pdf"          │
│ is_collection    │ false                                                     │
│ family           │ "Spider-Man"                                              │
│ cover_image      │ "public/comics/asm1-1760869800000-987654321.jpg"          │
│ uploader_id      │ 12 (NULL for anonymous uploads)                           │
│ created_at       │ 2026-10-19T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import Boolean, Enum as SQLEnum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from heroflicks.shared.models.base import Base, CreatedAtMixin
from heroflicks.shared.models.enums import Editorial, enum_values


class Comic(Base, CreatedAtMixin):
    """
    Comic model.

    Attributes:
        id: Auto-increment identifier
        title: Display title, used as the ranking tie-break
        editorial: Publisher (Marvel, DC, Otros)
        pdf_path: Relative path of the stored PDF
        is_collection: Whether this entry is a collected edition
        family: Franchise / family label
        cover_image: Relative path or URL of the cover
        uploader_id: User who uploaded the comic, if any
    """

    __tablename__ = "comics"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # METADATA
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    editorial: Mapped[Editorial] = mapped_column(
        SQLEnum(
            Editorial,
            name="editorial",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )

    is_collection: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    family: Mapped[str] = mapped_column(String(100), nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # FILES
    # ═══════════════════════════════════════════════════════════════════════════

    pdf_path: Mapped[str] = mapped_column(String(255), nullable=False)

    cover_image: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    uploader_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comic(id={self.id}, title={self.title})>"
