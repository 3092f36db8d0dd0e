"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the component
using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation catalog settings class (for testing)
    TemplatesFeatureSettings: Template rendering settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    translations_dir = settings.i18n.translations_dir
    routing = settings.templates.default_routing
    ```
"""

from infrastructure.configuration.features import TemplatesFeatureSettings
from infrastructure.configuration.infrastructure import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "I18nSettings", "TemplatesFeatureSettings"]
