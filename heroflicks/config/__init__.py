"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from heroflicks.config.settings import settings

    db_url = settings.DATABASE_URL
    upload_dir = settings.UPLOAD_DIR
"""

from heroflicks.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
