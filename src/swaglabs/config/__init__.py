"""Configuration module for the SwagLabs E2E suite.

Usage:
    from swaglabs.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)

Note:
    Fixtures receive the settings object explicitly (``swaglabs_settings``)
    rather than reading a module-level instance.
"""

from swaglabs.config.settings import BrowserOverride, Settings, get_settings

__all__ = ["BrowserOverride", "Settings", "get_settings"]
