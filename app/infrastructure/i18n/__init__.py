"""i18n system - locale resolution and translation lookup.

Main components:
- models: locale tag normalization, TranslationCatalog
- loader: TranslationLoader and JSONTranslationLoader
- catalog: CatalogStore, the lazily populated process-wide store
- resolvers: LocaleResolver picking the reply locale
- translator: Translator with fallback chain and argument interpolation
- service: TranslationService facade and the t()/tf() helpers
"""

from infrastructure.i18n.catalog import CatalogStore
from infrastructure.i18n.factory import create_catalog_store, get_catalog_store
from infrastructure.i18n.loader import JSONTranslationLoader, TranslationLoader
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    TranslationCatalog,
    base_language,
    normalize_locale,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import TranslationService, t, tf
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LOCALE",
    "TranslationCatalog",
    "normalize_locale",
    "base_language",
    "TranslationLoader",
    "JSONTranslationLoader",
    "CatalogStore",
    "create_catalog_store",
    "get_catalog_store",
    "LocaleResolver",
    "Translator",
    "TranslationService",
    "t",
    "tf",
]
