"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories and
domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ LocalFileStorage (uploads)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Map comics through TagAggregator / map_comic
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- TagAggregator: Batched tag lookups, top tags over a user's likes
- RankingService: Most liked / commented / recent, popular by tag, search
- RecommendationService: "Para ti" comics
- UploadService: Transactional multi-file upload
- ComicService: Comic CRUD, PDF lookup, comic tags
- TagService: Tag CRUD
- EngagementService: Likes and pending entries
- CommentService: Comments and ratings
- UserListService: Custom user lists

Usage:
======
    from heroflicks.shared.services import RankingService

    response = await RankingService(db).most_liked(limit=5)
"""

from heroflicks.shared.services.tag_aggregator import TagAggregator, TopTags
from heroflicks.shared.services.ranking_service import RankingService
from heroflicks.shared.services.recommendation_service import RecommendationService
from heroflicks.shared.services.upload_service import UploadForm, UploadService
from heroflicks.shared.services.comic_service import ComicService
from heroflicks.shared.services.tag_service import TagService
from heroflicks.shared.services.engagement_service import EngagementService
from heroflicks.shared.services.comment_service import CommentService
from heroflicks.shared.services.list_service import UserListService

__all__ = [
    "TagAggregator",
    "TopTags",
    "RankingService",
    "RecommendationService",
    "UploadForm",
    "UploadService",
    "ComicService",
    "TagService",
    "EngagementService",
    "CommentService",
    "UserListService",
]
