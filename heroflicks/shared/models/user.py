"""
User Entity Model

Represents a registered application user.

Registration, login and password hashing live in the identity service; this
backend only reads users to resolve bearer tokens and comment authors.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 12                                                        │
│ username         │ "peter"                                                   │
│ email            │ "peter@example.com"                                       │
│ password         │ "$2b$10$..." (opaque)                                     │
│ created_at       │ 2026-01-01T00:00:00Z                                      │
│ updated_at       │ 2026-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from heroflicks.shared.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Auto-increment identifier
        username: Display name (unique)
        email: Email address (unique)
        password: Password hash written by the identity service
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # Never returned in API responses
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
