"""Provider functions for dependency injection."""

from functools import lru_cache

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance.

    Read from the environment (and .env) on first call, then cached. Route
    handlers should depend on SettingsDep instead of calling this, so that
    tests can override it with app.dependency_overrides.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
