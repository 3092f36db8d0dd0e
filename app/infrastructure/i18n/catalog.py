"""Process-wide translation catalog store.

The store is populated lazily on first access, exactly once, and is
read-only afterwards. Reads after population take no lock.
"""

import threading
from types import MappingProxyType
from typing import List, Mapping, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CatalogStore:
    """Lazily populated, immutable locale -> catalog mapping.

    Concurrent first accesses serialize on an internal lock; only the first
    caller runs the loader, the others wait and then see the same result.

    Attributes:
        loader: TranslationLoader used for the single population.
    """

    def __init__(self, loader: TranslationLoader):
        self.loader = loader
        self._catalogs: Optional[Mapping[str, TranslationCatalog]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._catalogs is not None

    @property
    def catalogs(self) -> Mapping[str, TranslationCatalog]:
        """All catalogs, populating the store on first access."""
        catalogs = self._catalogs
        if catalogs is not None:
            return catalogs

        with self._lock:
            if self._catalogs is None:
                loaded = self.loader.load_all()
                self._catalogs = MappingProxyType(dict(loaded))
                logger.info("catalogs_loaded", locale_count=len(loaded))
            return self._catalogs

    def locales(self) -> List[str]:
        """Supported locale tags, in declaration order."""
        return list(self.catalogs)

    def catalog_for(self, locale: str) -> Optional[Mapping[str, str]]:
        """Get the key -> message mapping for a locale.

        Args:
            locale: Exact locale tag (case-sensitive).

        Returns:
            Read-only mapping, or None if the locale is not supported.
        """
        catalog = self.catalogs.get(locale)
        return catalog.messages if catalog is not None else None

    def lookup(self, locale: str, key: str) -> Optional[str]:
        catalog = self.catalogs.get(locale)
        return catalog.get_message(key) if catalog is not None else None

    def all_keys(self, locale: str) -> List[str]:
        """Sorted keys of a locale's catalog; empty if the locale is unknown.

        Used to audit completeness, typically over the default locale.
        """
        catalog = self.catalogs.get(locale)
        return catalog.keys() if catalog is not None else []

    def __contains__(self, locale: object) -> bool:
        return locale in self.catalogs
