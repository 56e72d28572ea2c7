"""
Service Dependencies

Services are created per request around the request's db session. They hold
no state beyond that session, so nothing is shared between requests.

UploadService is the exception: it holds the application's Database and
LocalFileStorage and opens its own dedicated transaction.

Usage:
======
    from heroflicks.api.dependencies.services import get_ranking_service

    @router.get("/most-liked")
    async def most_liked(service: RankingService = Depends(get_ranking_service)):
        return await service.most_liked()
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.api.dependencies.database import get_db
from heroflicks.shared.adapters.file_storage import LocalFileStorage
from heroflicks.shared.services.comic_service import ComicService
from heroflicks.shared.services.comment_service import CommentService
from heroflicks.shared.services.engagement_service import EngagementService
from heroflicks.shared.services.list_service import UserListService
from heroflicks.shared.services.ranking_service import RankingService
from heroflicks.shared.services.recommendation_service import RecommendationService
from heroflicks.shared.services.tag_aggregator import TagAggregator
from heroflicks.shared.services.tag_service import TagService
from heroflicks.shared.services.upload_service import UploadService


async def get_comic_service(db: AsyncSession = Depends(get_db)) -> ComicService:
    return ComicService(db)


async def get_ranking_service(db: AsyncSession = Depends(get_db)) -> RankingService:
    return RankingService(db)


async def get_recommendation_service(
    db: AsyncSession = Depends(get_db),
) -> RecommendationService:
    return RecommendationService(db)


async def get_tag_aggregator(db: AsyncSession = Depends(get_db)) -> TagAggregator:
    return TagAggregator(db)


async def get_tag_service(db: AsyncSession = Depends(get_db)) -> TagService:
    return TagService(db)


async def get_engagement_service(db: AsyncSession = Depends(get_db)) -> EngagementService:
    return EngagementService(db)


async def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(db)


async def get_list_service(db: AsyncSession = Depends(get_db)) -> UserListService:
    return UserListService(db)


def get_file_storage(request: Request) -> LocalFileStorage:
    return request.app.state.file_storage


async def get_upload_service(
    request: Request,
    storage: LocalFileStorage = Depends(get_file_storage),
) -> UploadService:
    """
    Dependency to get UploadService instance.

    Built from app.state rather than a request session.
    """
    return UploadService(request.app.state.database, storage)
