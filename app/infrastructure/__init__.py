"""Infrastructure modules for the i18n lookup service.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation tree store, lookup map, locale detection and key resolution
- services: Dependency injection services (SettingsDep, get_settings)
"""
