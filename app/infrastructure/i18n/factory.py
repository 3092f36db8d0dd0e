"""Factory functions for creating i18n components.

Provides the process-wide catalog store, built from the configured or the
shipped translation assets.
"""

import threading
from pathlib import Path
from typing import Optional

from infrastructure.configuration import settings
from infrastructure.i18n.catalog import CatalogStore
from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_store: Optional[CatalogStore] = None
_store_lock = threading.Lock()


def default_translations_dir() -> Path:
    """Locate the translation assets.

    Returns:
        ``settings.i18n.translations_dir`` when set, otherwise the assets
        shipped at ``modules/templates/locales``.
    """
    if settings.i18n.translations_dir is not None:
        return Path(settings.i18n.translations_dir)
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "modules" / "templates" / "locales"


def create_catalog_store(translations_dir: Optional[Path] = None) -> CatalogStore:
    """Create a new, not yet populated, catalog store.

    Args:
        translations_dir: Directory with JSON assets (default: auto-discover).

    Returns:
        CatalogStore backed by a JSONTranslationLoader.

    Raises:
        ValueError: If translations_dir does not exist.
    """
    translations_dir = translations_dir or default_translations_dir()
    loader = JSONTranslationLoader(translations_dir)
    logger.debug("catalog_store_created", translations_dir=str(translations_dir))
    return CatalogStore(loader)


def get_catalog_store() -> CatalogStore:
    """Return the process-wide catalog store, creating it on first call."""
    global _store
    store = _store
    if store is not None:
        return store
    with _store_lock:
        if _store is None:
            _store = create_catalog_store()
        return _store
