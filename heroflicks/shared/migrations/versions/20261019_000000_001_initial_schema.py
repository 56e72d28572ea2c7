# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables and default tags

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00

Tables created:
- users: Accounts (written by the identity service, read here)
- comics: Catalog entries
- tags / comics_tags: Labels and their comic associations
- likes / pending_entries: Per-user reactions, unique per (user, comic)
- comments: Text with optional 1..5 rating
- user_lists / user_list_comics: Custom lists and their members

Enums created:
- editorial: Marvel, DC, Otros
- list_type: pending, liked

Seed data:
- The ten default tags of the catalog
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


editorial_enum = sa.Enum("Marvel", "DC", "Otros", name="editorial")
list_type_enum = sa.Enum("pending", "liked", name="list_type")

DEFAULT_TAGS = (
    "Superhéroes",
    "Marvel",
    "DC",
    "Acción",
    "Aventura",
    "Ciencia Ficción",
    "Drama",
    "Misterio",
    "Individual",
    "Equipo",
)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    # ═══════════════════════════════════════════════════════════════════════════
    # USERS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        _created_at(),
        _updated_at(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # COMICS & TAGS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "comics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("editorial", editorial_enum, nullable=False),
        sa.Column("is_collection", sa.Boolean(), nullable=False),
        sa.Column("family", sa.String(100), nullable=False),
        sa.Column("pdf_path", sa.String(255), nullable=False),
        sa.Column("cover_image", sa.String(255), nullable=True),
        sa.Column("uploader_id", sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["uploader_id"],
            ["users.id"],
            name="fk_comics_uploader_id_users",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_comics"),
    )
    op.create_index("ix_comics_title", "comics", ["title"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_tags"),
        sa.UniqueConstraint("name", name="uq_tags_name"),
    )

    op.create_table(
        "comics_tags",
        sa.Column("comic_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["comic_id"], ["comics.id"], name="fk_comics_tags_comic_id_comics", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["tag_id"], ["tags.id"], name="fk_comics_tags_tag_id_tags", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("comic_id", "tag_id", name="pk_comics_tags"),
    )
    op.create_index("ix_comics_tags_tag_id", "comics_tags", ["tag_id"])

    # ═══════════════════════════════════════════════════════════════════════════
    # ENGAGEMENT
    # ═══════════════════════════════════════════════════════════════════════════
    for table, unique_name in (
        ("likes", "uq_likes_user_comic"),
        ("pending_entries", "uq_pending_entries_user_comic"),
    ):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("user_id", sa.Integer(), nullable=False),
            sa.Column("comic_id", sa.Integer(), nullable=False),
            _created_at(),
            sa.ForeignKeyConstraint(
                ["user_id"], ["users.id"], name=f"fk_{table}_user_id_users", ondelete="CASCADE"
            ),
            sa.ForeignKeyConstraint(
                ["comic_id"], ["comics.id"], name=f"fk_{table}_comic_id_comics", ondelete="CASCADE"
            ),
            sa.PrimaryKeyConstraint("id", name=f"pk_{table}"),
            sa.UniqueConstraint("user_id", "comic_id", name=unique_name),
        )
        op.create_index(f"ix_{table}_comic_id", table, ["comic_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("comic_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=True),
        _created_at(),
        sa.CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name="ck_comments_rating_range",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_comments_user_id_users", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["comic_id"], ["comics.id"], name="fk_comments_comic_id_comics", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_comments"),
    )
    op.create_index("ix_comments_comic_id", "comments", ["comic_id"])

    # ═══════════════════════════════════════════════════════════════════════════
    # USER LISTS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "user_lists",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("list_name", sa.String(100), nullable=False),
        sa.Column("list_type", list_type_enum, nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_user_lists_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_user_lists"),
        sa.UniqueConstraint(
            "user_id", "list_name", "list_type", name="uq_user_lists_user_name_type"
        ),
    )
    op.create_index("ix_user_lists_user_id", "user_lists", ["user_id"])

    op.create_table(
        "user_list_comics",
        sa.Column("list_id", sa.Integer(), nullable=False),
        sa.Column("comic_id", sa.Integer(), nullable=False),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["list_id"],
            ["user_lists.id"],
            name="fk_user_list_comics_list_id_user_lists",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["comic_id"],
            ["comics.id"],
            name="fk_user_list_comics_comic_id_comics",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("list_id", "comic_id", name="pk_user_list_comics"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SEED DATA
    # ═══════════════════════════════════════════════════════════════════════════
    tags = sa.table("tags", sa.column("name", sa.String))
    op.bulk_insert(tags, [{"name": name} for name in DEFAULT_TAGS])


def downgrade() -> None:
    op.drop_table("user_list_comics")
    op.drop_index("ix_user_lists_user_id", table_name="user_lists")
    op.drop_table("user_lists")
    op.drop_index("ix_comments_comic_id", table_name="comments")
    op.drop_table("comments")
    for table in ("pending_entries", "likes"):
        op.drop_index(f"ix_{table}_comic_id", table_name=table)
        op.drop_table(table)
    op.drop_index("ix_comics_tags_tag_id", table_name="comics_tags")
    op.drop_table("comics_tags")
    op.drop_table("tags")
    op.drop_index("ix_comics_title", table_name="comics")
    op.drop_table("comics")
    op.drop_table("users")

    list_type_enum.drop(op.get_bind(), checkfirst=True)
    editorial_enum.drop(op.get_bind(), checkfirst=True)
