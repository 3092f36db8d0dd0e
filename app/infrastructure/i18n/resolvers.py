"""Locale resolution logic for determining the reply language.

Picks the best supported locale from an ordered list of candidate sources:
the component configuration first, then the message metadata.
"""

from typing import Any, List, Mapping, Optional

from infrastructure.i18n.catalog import CatalogStore
from infrastructure.i18n.models import DEFAULT_LOCALE, base_language, normalize_locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Resolves the locale of an invocation against the catalog store.

    Candidate order (first resolvable candidate wins):
    1. configuration ``locale``
    2. configuration ``templates.locale``
    3. message metadata ``locale``
    4. message metadata ``lang``
    5. default locale ("en")
    """

    def __init__(self, store: CatalogStore, default_locale: str = DEFAULT_LOCALE):
        """Initialize locale resolver.

        Args:
            store: Catalog store defining the supported locales.
            default_locale: Fallback locale when no candidate resolves.
        """
        self.store = store
        self.default_locale = default_locale

    def resolve_supported(self, candidate: Any) -> Optional[str]:
        """Map a raw locale string onto a supported locale.

        Tries an exact match, then a case-insensitive match, then the base
        language alone.

        Args:
            candidate: Raw locale value (e.g. "ja_JP.UTF-8").

        Returns:
            Supported locale tag, or None if nothing matches.
        """
        normalized = normalize_locale(candidate)
        if normalized is None:
            return None

        if normalized in self.store:
            return normalized

        lowered = normalized.lower()
        for locale in self.store.locales():
            if locale.lower() == lowered:
                return locale

        base = base_language(normalized)
        if base in self.store:
            return base

        return None

    @staticmethod
    def candidates(
        configuration: Any,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> List[str]:
        """Collect raw locale candidates in precedence order.

        Non-string values are ignored.

        Args:
            configuration: Untyped component configuration document.
            metadata: Message metadata map.

        Returns:
            Raw candidate strings, highest precedence first.
        """
        found: List[Any] = []
        if isinstance(configuration, Mapping):
            found.append(configuration.get("locale"))
            templates = configuration.get("templates")
            if isinstance(templates, Mapping):
                found.append(templates.get("locale"))
        if isinstance(metadata, Mapping):
            found.append(metadata.get("locale"))
            found.append(metadata.get("lang"))
        return [value for value in found if isinstance(value, str)]

    def select_locale(
        self,
        configuration: Any,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Select the locale for an invocation.

        Args:
            configuration: Untyped component configuration document.
            metadata: Message metadata map.

        Returns:
            Supported locale tag, or the default locale.
        """
        for candidate in self.candidates(configuration, metadata):
            resolved = self.resolve_supported(candidate)
            if resolved is not None:
                logger.debug("locale_selected", candidate=candidate, locale=resolved)
                return resolved

        logger.debug("locale_defaulted", locale=self.default_locale)
        return self.default_locale
