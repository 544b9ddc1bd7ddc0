"""Top-level Settings: application fields plus one section per concern."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Infrastructure settings
from infrastructure.configuration.infrastructure import I18nSettings


class Settings(BaseSettings):
    """Application settings.

    Each section (currently only ``i18n``) is its own BaseSettings class and
    reads its own prefixed environment variables.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        for root in settings.i18n.WORKSPACE_ROOTS:
            ...

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Infrastructure settings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Build every section not passed explicitly.

        Args:
            **kwargs: Field values, or ready-made sections (e.g. ``i18n=``).
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
