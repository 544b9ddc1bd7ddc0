"""Factory functions for creating i18n components.

Provides convenience functions for initializing the lookup service with
configuration taken from application settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Union

import structlog
from infrastructure.i18n.service import I18nService

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


def create_i18n_service(
    workspace_roots: Optional[Iterable[Union[str, Path]]] = None,
    settings: Optional["Settings"] = None,
    preload: bool = True,
) -> I18nService:
    """Create and configure an I18nService instance.

    Args:
        workspace_roots: Workspace root directories (default: settings.i18n.WORKSPACE_ROOTS)
        settings: Settings instance (default: cached application settings)
        preload: Whether to load all roots immediately (default: True)

    Returns:
        I18nService: Configured lookup service

    Raises:
        ValueError: If a workspace root does not exist

    Usage:
        # Use configured roots, preload everything
        service = create_i18n_service()

        # Explicit roots
        service = create_i18n_service(workspace_roots=["/src/shop", "/src/admin"])

        # Lazy loading
        service = create_i18n_service(preload=False)
        service.load()
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    i18n_settings = settings.i18n
    if workspace_roots is None:
        workspace_roots = i18n_settings.WORKSPACE_ROOTS

    service = I18nService(fallback_locale=i18n_settings.FALLBACK_LOCALE)
    for root_dir in workspace_roots:
        service.register_root(
            Path(root_dir),
            locale_glob=i18n_settings.LOCALE_FILE_GLOB,
            config_files=i18n_settings.ROOT_CONFIG_FILES,
        )

    if preload:
        default_locales = service.load()
        logger.info(
            "i18n_service_created_with_preload",
            root_count=len(service.loaders),
            default_locales=default_locales,
        )
    else:
        logger.info(
            "i18n_service_created_lazy",
            root_count=len(service.loaders),
        )

    return service
