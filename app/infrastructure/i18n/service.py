"""Translation service facade.

Bundles the catalog store, translator and locale resolver behind one object
so callers depend on a single collaborator that is easy to replace in tests.
"""

from typing import Any, List, Mapping, Optional

from infrastructure.i18n.catalog import CatalogStore
from infrastructure.i18n.factory import get_catalog_store
from infrastructure.i18n.models import DEFAULT_LOCALE
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import TranslationArgs, Translator


class TranslationService:
    """Class-based translation service.

    Usage:
        service = TranslationService()
        locale = service.select_locale(config, msg.metadata)
        message = service.translate(locale, "errors.missing_scope")
    """

    def __init__(self, store: Optional[CatalogStore] = None):
        """Initialize translation service.

        Args:
            store: Optional catalog store. Defaults to the process-wide store.
        """
        self.store = store or get_catalog_store()
        self.translator = Translator(self.store, fallback_locale=DEFAULT_LOCALE)
        self.resolver = LocaleResolver(self.store, default_locale=DEFAULT_LOCALE)

    def translate(self, locale: str, key: str) -> str:
        return self.translator.translate(locale, key)

    def translate_with_args(self, locale: str, key: str, args: TranslationArgs) -> str:
        return self.translator.translate_with_args(locale, key, args)

    def select_locale(
        self,
        configuration: Any,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return self.resolver.select_locale(configuration, metadata)

    def all_keys(self, locale: str = DEFAULT_LOCALE) -> List[str]:
        return self.store.all_keys(locale)

    def supported_locales(self) -> List[str]:
        return self.store.locales()


def t(locale: str, key: str) -> str:
    """Translate ``key`` with the process-wide store."""
    return TranslationService().translate(locale, key)


def tf(locale: str, key: str, args: TranslationArgs) -> str:
    """Translate ``key`` and interpolate ``args`` with the process-wide store."""
    return TranslationService().translate_with_args(locale, key, args)
