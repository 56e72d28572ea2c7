"""
Base Repository

Shared persistence helpers for the HeroFlicks tables. Each entity repository
subclasses BaseRepository with its model and adds the catalog queries it owns.

    class TagRepository(BaseRepository[Tag]):
        def __init__(self, session: AsyncSession):
            super().__init__(Tag, session)

Writes flush but never commit. The request session from get_db() commits once
the handler returns; the upload workflow manages its own transaction.

Idempotent Inserts:
===================
A like, a pending entry, a comic/tag link and a list membership are
"make sure this row exists" writes. insert_ignore() issues
INSERT ... ON CONFLICT DO NOTHING on PostgreSQL and SQLite alike, so
concurrent duplicates collapse into one row. Foreign key violations are not
conflicts and still raise.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import Insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from heroflicks.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)

_DIALECT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class BaseRepository(Generic[ModelType]):
    """
    CRUD over one mapped table keyed by an integer ``id``.

    Attributes:
        model: Mapped class handled by this repository
        session: Session shared with the other repositories of the request
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def list(self, *, order_by: Optional[str] = None) -> list[ModelType]:
        """All rows, optionally sorted ascending by one column (then by id)."""
        query = select(self.model)
        if order_by is not None:
            query = query.order_by(getattr(self.model, order_by).asc(), self.model.id.asc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Row count, narrowed by column equality.

        SQL Generated:
            SELECT count(*) FROM likes WHERE comic_id = 42
        """
        query = select(sql_count()).select_from(self.model)
        for field, value in (filters or {}).items():
            query = query.where(getattr(self.model, field) == value)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def exists(self, record_id: int) -> bool:
        return await self.count({"id": record_id}) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """Add a row and return it with its generated id and server defaults loaded."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def insert_ignore(self, **values: Any) -> bool:
        """
        Insert a row unless an equal key is already stored.

        Returns:
            True when this call created the row

        SQL Generated:
            INSERT INTO likes (user_id, comic_id) VALUES (1, 42)
            ON CONFLICT DO NOTHING
        """
        dialect = self.session.get_bind().dialect.name
        try:
            insert_for: Any = _DIALECT_INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"insert_ignore is not supported on dialect '{dialect}'") from None
        stmt: Insert = insert_for(self.model).values(**values).on_conflict_do_nothing()
        result = await self.session.execute(stmt)
        return (result.rowcount or 0) > 0

    async def update(self, record_id: int, **kwargs: Any) -> Optional[ModelType]:
        """
        Assign the given columns; None values leave a column unchanged.

        Returns:
            The refreshed row, or None when no row has this id
        """
        instance = await self.get(record_id)
        if instance is None:
            return None
        for field, value in kwargs.items():
            if value is not None:
                setattr(instance, field, value)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: int) -> bool:
        """
        Remove a row by id. Dependent rows go with it through ON DELETE CASCADE.

        Returns:
            False when no row has this id
        """
        instance = await self.get(record_id)
        if instance is None:
            return False
        await self.session.delete(instance)
        await self.session.flush()
        return True
