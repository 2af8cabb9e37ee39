"""Configuration module for the treasury sweeper.

Usage:
    from treasury.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.ethers_provider_url)

Note:
    There is no module-level `settings` instance so that importing the
    package never reads the environment. Call `get_settings()` at runtime.
"""

from treasury.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
