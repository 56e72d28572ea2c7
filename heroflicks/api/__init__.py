"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application factory and entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers

Usage:
======
    # Run the API
    uvicorn heroflicks.api.main:app --port 3007 --reload

    # Build an app around an explicit database (tests)
    from heroflicks.api.main import create_application
    app = create_application(database=Database("sqlite+aiosqlite:///./test.db"))
"""
