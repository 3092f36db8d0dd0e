"""Feature-level fixtures for i18n system tests.

Provides an on-disk translation directory and the components built on it.
"""

import json

import pytest

from infrastructure.i18n import (
    CatalogStore,
    JSONTranslationLoader,
    LocaleResolver,
    Translator,
)


def _write_catalog(directory, locale, messages):
    """Write ``<locale>.json`` into directory."""
    path = directory / f"{locale}.json"
    path.write_text(json.dumps(messages, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def translations_dir(tmp_path):
    """Create a temporary translation directory.

    Returns a directory structure like:
    - locales.json  (["en", "en-GB", "fr", "ja", "ar"])
    - en.json       (complete)
    - en-GB.json    (one override)
    - fr.json
    - ja.json
    - ar.json
    """
    (tmp_path / "locales.json").write_text(
        json.dumps(["en", "en-GB", "fr", "ja", "ar"]), encoding="utf-8"
    )
    _write_catalog(
        tmp_path,
        "en",
        {
            "qa.title": "Template settings",
            "errors.invalid_input": "Invalid input",
            "errors.unsupported_operation": "Unsupported operation '{operation}', expected '{supported}'",
            "greeting": "Hello {name}",
        },
    )
    _write_catalog(tmp_path, "en-GB", {"qa.title": "Template settings (UK)"})
    _write_catalog(
        tmp_path,
        "fr",
        {"qa.title": "Paramètres du modèle", "greeting": "Bonjour {name}"},
    )
    _write_catalog(tmp_path, "ja", {"qa.title": "テンプレート設定"})
    _write_catalog(tmp_path, "ar", {"qa.title": "إعدادات القالب"})
    return tmp_path


@pytest.fixture
def loader(translations_dir):
    return JSONTranslationLoader(translations_dir)


@pytest.fixture
def catalog_store(loader):
    """Fresh, unpopulated store over the temporary catalogs."""
    return CatalogStore(loader)


@pytest.fixture
def translator(catalog_store):
    return Translator(catalog_store)


@pytest.fixture
def resolver(catalog_store):
    return LocaleResolver(catalog_store)


@pytest.fixture
def write_catalog():
    """Helper writing ``<locale>.json`` files into a directory."""
    return _write_catalog
