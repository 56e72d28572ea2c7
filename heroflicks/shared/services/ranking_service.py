"""
Ranking Service

Explore-screen rankings, search and the catalog listing.

Rankings:
=========
    most_liked       likes desc, title asc
    most_commented   comments desc, title asc
    recently_added   created_at desc, title asc
    popular_by_tag   likes desc, title asc, restricted to one tag

"Nothing found" is never an error here: the response carries an empty list
and a message for the client to show.

Usage:
======
    service = RankingService(db)
    response = await service.popular_by_tag("Acción", limit=5)
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.config.settings import settings
from heroflicks.shared.core.exceptions import ValidationError
from heroflicks.shared.repositories.comic_repository import ComicRepository, ComicRow
from heroflicks.shared.repositories.tag_repository import TagRepository
from heroflicks.shared.schemas.comic import ComicListResponse
from heroflicks.shared.services.tag_aggregator import TagAggregator


SEARCH_PROMPT = "Por favor, introduce un término de búsqueda."


class RankingService:
    """Read-only comic rankings with derived counts."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comic_repo = ComicRepository(session)
        self.tag_repo = TagRepository(session)
        self.aggregator = TagAggregator(session)

    async def _respond(self, rows: list[ComicRow], message: Optional[str] = None) -> ComicListResponse:
        return ComicListResponse(comics=await self.aggregator.map_rows(rows), message=message)

    # ═══════════════════════════════════════════════════════════════════════════
    # RANKINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def most_liked(self, limit: int = settings.RANKING_DEFAULT_LIMIT) -> ComicListResponse:
        return await self._respond(await self.comic_repo.most_liked(limit))

    async def most_commented(self, limit: int = settings.RANKING_DEFAULT_LIMIT) -> ComicListResponse:
        return await self._respond(await self.comic_repo.most_commented(limit))

    async def recently_added(self, limit: int = settings.RANKING_DEFAULT_LIMIT) -> ComicListResponse:
        return await self._respond(await self.comic_repo.recently_added(limit))

    async def popular_by_tag(
        self,
        tag_name: Optional[str],
        limit: int = settings.RANKING_DEFAULT_LIMIT,
    ) -> ComicListResponse:
        """
        Most liked comics carrying the named tag.

        Raises:
            ValidationError: If tag_name is missing or blank
        """
        name = (tag_name or "").strip()
        if not name:
            raise ValidationError("El parámetro 'tagName' es requerido.")

        tag = await self.tag_repo.get_by_name(name)
        if tag is None:
            return ComicListResponse(message=f"La etiqueta '{name}' no fue encontrada.")

        rows = await self.comic_repo.popular_by_tag(tag.id, limit)
        if not rows:
            return ComicListResponse(
                message=f"No hay cómics (o no hay cómics con likes) para la etiqueta '{name}'."
            )
        return await self._respond(rows)

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCH & CATALOG
    # ═══════════════════════════════════════════════════════════════════════════

    async def search(self, term: Optional[str]) -> ComicListResponse:
        """Substring search; a blank term returns a prompt without querying."""
        term = (term or "").strip()
        if not term:
            return ComicListResponse(message=SEARCH_PROMPT)

        rows = await self.comic_repo.search(term)
        if not rows:
            return ComicListResponse(message=f'No se encontraron cómics para "{term}".')
        return await self._respond(rows)

    async def list_comics(self, tag_name: Optional[str] = None) -> ComicListResponse:
        """Whole catalog by title, optionally filtered by exact tag name."""
        tag_name = (tag_name or "").strip()
        if not tag_name:
            return await self._respond(await self.comic_repo.list_with_counts())

        tag = await self.tag_repo.get_by_name(tag_name)
        if tag is None:
            return ComicListResponse(message=f"La etiqueta '{tag_name}' no fue encontrada.")
        return await self._respond(await self.comic_repo.list_with_counts(tag_id=tag.id))
