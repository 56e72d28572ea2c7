"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Local file placement

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database object (engine + session factory)
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← File storage
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← JWT, tag id parsing

Usage:
======
    from heroflicks.shared.models import Comic, Tag
    from heroflicks.shared.repositories import ComicRepository
    from heroflicks.shared.services import RankingService
    from heroflicks.shared.core import logger, HeroFlicksException
"""
