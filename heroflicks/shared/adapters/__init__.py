"""
Adapters Package

External collaborators.

Contents:
=========
- file_storage: Placement of uploaded PDFs and covers on local disk

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from heroflicks.shared.adapters.file_storage import LocalFileStorage
"""

from heroflicks.shared.adapters.file_storage import LocalFileStorage, StoredFile

__all__ = [
    "LocalFileStorage",
    "StoredFile",
]
