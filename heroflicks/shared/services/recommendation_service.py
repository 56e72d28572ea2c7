"""
Recommendation Service

"Para ti": comics sharing the tags a user likes most.

Algorithm:
==========
    1. Comic ids the user liked            → none: empty result + message
    2. Top 2 tags across those comics      → none: empty result + message
    3. Comics carrying EITHER tag (OR), each once, ordered by title
    4. Response names the tags used

Comics the user already liked are not filtered out.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.core.logging import logger
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.schemas.comic import RecommendationResponse, TagInfo
from heroflicks.shared.services.tag_aggregator import TagAggregator


TOP_TAG_COUNT = 2

NO_LIKES_MESSAGE = "Aún no te ha gustado ningún cómic. ¡Explora y dale like a tus favoritos!"
NO_TAGS_MESSAGE = "Los cómics que te gustan no tienen etiquetas o no se pudieron procesar."


class RecommendationService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comic_repo = ComicRepository(session)
        self.aggregator = TagAggregator(session)

    async def comics_for_you(self, user_id: int) -> RecommendationResponse:
        top = await self.aggregator.top_tags_for_user_likes(user_id, TOP_TAG_COUNT)
        if not top.has_likes:
            return RecommendationResponse(message=NO_LIKES_MESSAGE)
        if not top.tags:
            return RecommendationResponse(message=NO_TAGS_MESSAGE)

        tag_ids = [tag.tag_id for tag in top.tags]
        rows = await self.comic_repo.with_any_tag(tag_ids)
        names = ", ".join(tag.tag_name for tag in top.tags)

        logger.debug(
            "Recommendations computed",
            user_id=user_id,
            tag_ids=tag_ids,
            comic_count=len(rows),
        )
        return RecommendationResponse(
            comics=await self.aggregator.map_rows(rows),
            recommended_based_on_tags=[TagInfo(id=tag.tag_id, name=tag.tag_name) for tag in top.tags],
            message=(
                "Cómics recomendados basados en las etiquetas más frecuentes "
                f"de tus 'Me Gusta': {names}."
            ),
        )
