"""
Configuration package for the MoodLift backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    SupabaseSettings,
    SecuritySettings,
    SiteSettings,
    settings,
    get_settings,
    use_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "SupabaseSettings",
    "SecuritySettings",
    "SiteSettings",
    "settings",
    "get_settings",
    "use_settings",
]
