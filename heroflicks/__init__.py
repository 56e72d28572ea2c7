"""
HeroFlicks Backend

REST backend for a comic catalog: comics, tags, likes, pending lists,
comments, user lists, explore rankings and "for you" recommendations.

Package Structure:
==================
    heroflicks/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas, adapters
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn heroflicks.api.main:app --reload
"""
