"""Translation loading interface and implementations.

Defines the contract for loading translations and provides the JSON loader
for the ``locales.json`` + ``<locale>.json`` asset layout.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALES_INDEX = "locales.json"


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where the supported locale set comes from and how
    a single locale's catalog is parsed.
    """

    @abstractmethod
    def supported_locales(self) -> List[str]:
        """Return the declared locale tags, in declaration order."""

    @abstractmethod
    def load(self, locale: str) -> Optional[TranslationCatalog]:
        """Load translations for a specific locale.

        Args:
            locale: Locale tag to load.

        Returns:
            TranslationCatalog, or None when the locale has no asset at all.
        """

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all declared locales.

        Locales without an asset are skipped.

        Returns:
            Dict mapping locale tag to TranslationCatalog, in declaration order.
        """
        result: Dict[str, TranslationCatalog] = {}
        for locale in self.supported_locales():
            catalog = self.load(locale)
            if catalog is None:
                logger.warning("could_not_load_locale", locale=locale)
                continue
            result[locale] = catalog
        return result


class JSONTranslationLoader(TranslationLoader):
    """Loader for flat JSON translation files.

    Expects ``locales.json`` (a JSON list of locale tags) and one
    ``<locale>.json`` file per tag holding a flat ``{key: message}`` object.
    When ``locales.json`` is absent the locale set is discovered from the
    file names in the directory.

    Attributes:
        translations_dir: Path to directory containing the JSON files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize JSON translation loader.

        Args:
            translations_dir: Path to directory with JSON translation files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

    def supported_locales(self) -> List[str]:
        index = self.translations_dir / LOCALES_INDEX
        if index.is_file():
            try:
                declared = json.loads(index.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.error("locales_index_unreadable", file=str(index), error=str(e))
                declared = None
            if isinstance(declared, list):
                locales: List[str] = []
                for item in declared:
                    if isinstance(item, str) and item and item not in locales:
                        locales.append(item)
                return locales
            logger.warning("invalid_locales_index", file=str(index), expected="list")

        return sorted(
            path.stem
            for path in self.translations_dir.glob("*.json")
            if path.name != LOCALES_INDEX
        )

    def load(self, locale: str) -> Optional[TranslationCatalog]:
        """Load one locale file.

        A file that cannot be parsed, or is not an object of strings, yields
        an empty catalog rather than failing the whole store.

        Args:
            locale: Locale tag, used as the file stem.

        Returns:
            TranslationCatalog, or None when ``<locale>.json`` does not exist.
        """
        path = self.translations_dir / f"{locale}.json"
        if not path.is_file():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("malformed_locale_file", locale=locale, error=str(e))
            return TranslationCatalog(locale=locale)

        if not isinstance(data, dict) or not all(
            isinstance(value, str) for value in data.values()
        ):
            logger.warning(
                "malformed_locale_file",
                locale=locale,
                error="expected an object of strings",
            )
            return TranslationCatalog(locale=locale)

        return TranslationCatalog(locale=locale, messages=data)
