"""Internationalization infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation catalog configuration.

    The fallback locale is not configurable: ``en`` is part of the component
    contract and must always be shipped.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding ``locales.json`` and one
            ``<locale>.json`` file per supported locale. Defaults to the
            assets shipped with the templates module.

    Example:
        ```python
        from infrastructure.configuration import settings

        translations_dir = settings.i18n.translations_dir
        ```
    """

    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Override for the translation asset directory",
    )

    @field_validator("translations_dir", mode="before")
    @classmethod
    def validate_translations_dir(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty value as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
