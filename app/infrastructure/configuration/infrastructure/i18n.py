"""Translation lookup infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation tree loading and locale detection configuration.

    Environment Variables:
        I18N_WORKSPACE_ROOTS: JSON list of workspace root directories to load
        I18N_LOCALE_FILE_GLOB: Glob of translation files inside a root
            (default: config/locales/**/*.yml)
        I18N_ROOT_CONFIG_FILES: JSON list of files searched for the
            default-locale directive, relative to the root
        I18N_FALLBACK_LOCALE: Locale used when a root has no locales (default: en)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        pattern = settings.i18n.LOCALE_FILE_GLOB
        roots = settings.i18n.WORKSPACE_ROOTS
        ```
    """

    WORKSPACE_ROOTS: list[str] = Field(default=[], alias="I18N_WORKSPACE_ROOTS")
    LOCALE_FILE_GLOB: str = Field(
        default="config/locales/**/*.yml", alias="I18N_LOCALE_FILE_GLOB"
    )
    ROOT_CONFIG_FILES: list[str] = Field(
        default=["config/application.rb", "config/initializers/locale.rb"],
        alias="I18N_ROOT_CONFIG_FILES",
    )
    FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")

    @field_validator("FALLBACK_LOCALE", mode="before")
    @classmethod
    def validate_fallback_locale(cls, v: str) -> str:
        """Strip whitespace and reject an empty fallback locale."""
        if v is None or not str(v).strip():
            return "en"
        return str(v).strip()
