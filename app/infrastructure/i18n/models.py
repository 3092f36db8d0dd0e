"""Translation models for i18n system.

Defines locale tag normalization and the immutable per-locale catalog.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

# Ultimate fallback locale. Its catalog must always be shipped.
DEFAULT_LOCALE = "en"


def normalize_locale(raw: Any) -> Optional[str]:
    """Normalize an arbitrary locale string into a ``lang[-REGION]`` tag.

    Encoding (``.UTF-8``) and variant (``@euro``) suffixes are dropped,
    underscores become hyphens, the language subtag is lowercased and every
    following subtag uppercased. Empty subtags are discarded.

    Args:
        raw: Raw locale value (e.g. "ja_JP.UTF-8", "EN-us").

    Returns:
        Normalized tag (e.g. "ja-JP", "en-US"), or None when nothing is left.

    Examples:
        >>> normalize_locale("en_US")
        'en-US'
        >>> normalize_locale("de_DE@euro")
        'de-DE'
        >>> normalize_locale("  ") is None
        True
    """
    if not isinstance(raw, str):
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    cleaned = cleaned.split(".", 1)[0]
    cleaned = cleaned.split("@", 1)[0]
    cleaned = cleaned.replace("_", "-")

    parts: List[str] = []
    for index, part in enumerate(cleaned.split("-")):
        if not part:
            continue
        parts.append(part.lower() if index == 0 else part.upper())
    if not parts:
        return None
    return "-".join(parts)


def base_language(tag: str) -> str:
    """Get the language subtag of a locale tag (e.g. "en" from "en-US").

    Args:
        tag: Locale tag.

    Returns:
        Lowercased language subtag.
    """
    return tag.split("-", 1)[0].lower()


@dataclass(frozen=True)
class TranslationCatalog:
    """Read-only translations for a single locale.

    Attributes:
        locale: Locale tag this catalog is for, as declared by the assets.
        messages: Flat mapping of dotted key to translated string.
    """

    locale: str
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a translation message by key.

        Args:
            key: Dotted translation key (e.g. "errors.invalid_input").

        Returns:
            Translated message string, or None if not found.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def keys(self) -> List[str]:
        """All keys of this catalog in sorted order."""
        return sorted(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
