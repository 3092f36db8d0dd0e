"""Translation lookup with a locale fallback chain and argument interpolation."""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from infrastructure.i18n.catalog import CatalogStore
from infrastructure.i18n.models import DEFAULT_LOCALE, base_language
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TranslationArgs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class Translator:
    """Looks up translated messages; never fails.

    Lookup order: exact locale, base language of the locale, fallback locale,
    and finally the key itself so UI and error text is never blank.

    Attributes:
        store: CatalogStore holding all catalogs.
        fallback_locale: Locale consulted after the requested one.
    """

    def __init__(self, store: CatalogStore, fallback_locale: str = DEFAULT_LOCALE):
        self.store = store
        self.fallback_locale = fallback_locale

    def lookup(self, locale: str, key: str) -> Optional[str]:
        """Run the fallback chain without the final key echo.

        Returns:
            The first message found, or None.
        """
        message = self.store.lookup(locale, key)
        if message is not None:
            return message

        for fallback in (base_language(locale), self.fallback_locale):
            message = self.store.lookup(fallback, key)
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=locale,
                    fallback_locale=fallback,
                )
                return message

        return None

    def translate(self, locale: str, key: str) -> str:
        """Translate a key.

        Args:
            locale: Locale tag to translate to.
            key: Dotted translation key.

        Returns:
            The translated message, or ``key`` unchanged when no catalog has it.
        """
        message = self.lookup(locale, key)
        if message is None:
            logger.debug("translation_not_found", key=key, locale=locale)
            return key
        return message

    def translate_with_args(self, locale: str, key: str, args: TranslationArgs) -> str:
        """Translate a key and substitute ``{name}`` placeholders.

        Pairs are applied in order with plain substring replacement, so a value
        that itself contains ``{other}`` can be expanded by a later pair.

        Args:
            locale: Locale tag to translate to.
            key: Dotted translation key.
            args: Ordered ``(name, value)`` pairs, or a mapping.

        Returns:
            Interpolated message.
        """
        text = self.translate(locale, key)
        pairs = args.items() if isinstance(args, Mapping) else args
        for name, value in pairs:
            text = text.replace(f"{{{name}}}", str(value))
        return text

    def has_message(self, locale: str, key: str) -> bool:
        """Check if the exact locale has the key (no fallback)."""
        return self.store.lookup(locale, key) is not None
