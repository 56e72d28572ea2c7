"""
Database Module

Database connectivity and session management for HeroFlicks.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   create_application()                                                      │
│       │  builds Database(url), stores it on app.state.database              │
│       ▼                                                                     │
│   FastAPI Route ── Depends(get_db) ──► Database.get_db()                    │
│       │                                   one AsyncSession per request      │
│       ▼                                                                     │
│   Service ──► Repository ──► SQL                                            │
│                                                                             │
│   UploadService ──► Database.session() + session.begin()                    │
│                     dedicated transaction for the upload workflow           │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
======
    from heroflicks.shared.db import Database

    database = Database(settings.DATABASE_URL)
    await database.init()
"""

from heroflicks.shared.db.session import Database

__all__ = [
    "Database",
]
