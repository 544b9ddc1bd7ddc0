"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the i18n
lookup service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation loading settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    locale_glob = settings.i18n.LOCALE_FILE_GLOB
    fallback = settings.i18n.FALLBACK_LOCALE

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
