"""Component configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Feature settings
from infrastructure.configuration.features import TemplatesFeatureSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import I18nSettings


class Settings(BaseSettings):
    """Component configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Features**: Template rendering defaults
    - **Infrastructure**: Translation catalog discovery

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.configuration import settings

        translations_dir = settings.i18n.translations_dir
        output_path = settings.templates.default_output_path

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Feature settings
    templates: TemplatesFeatureSettings

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
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Features
            "templates": TemplatesFeatureSettings,
            # Infrastructure
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


# Create the singleton settings instance
settings = Settings()
