import json
from pathlib import Path

import pytest
from sharedstrings import constants as const
from sharedstrings.locale_utils import FixedLocaleSource
from sharedstrings.resolver import StringResolver
from sharedstrings.store import DocumentStore, InlineStore

EN_STRINGS = {
    "app_name": "demo",
    "counter_label": "Counter: %d",
    "greeting": "Hello, %s! You have %d new messages",
    "only_default": "English only",
}

AR_STRINGS = {
    "app_name": "تطبيق تجريبي",
    "counter_label": "العداد: %d",
    "greeting": "مرحباً %s! لديك %d رسائل جديدة",
}


def write_document(directory: Path, locale: str, data) -> Path:
    path = directory / f"{const.DOCUMENT_PREFIX}{locale}.{const.DOCUMENT_EXTENSION}"
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def lang_dir(tmp_path):
    d = tmp_path / "lang"
    d.mkdir()
    write_document(d, "en", EN_STRINGS)
    write_document(d, "ar", AR_STRINGS)
    return d


@pytest.fixture
def document_store(lang_dir):
    return DocumentStore(lang_dir, default_locale="en")


@pytest.fixture
def inline_store():
    return InlineStore({"en": EN_STRINGS, "ar": AR_STRINGS}, default_locale="en")


@pytest.fixture
def make_resolver(document_store):
    def _make(locale: str = "en", store=None, **kwargs) -> StringResolver:
        return StringResolver(
            store or document_store, locale_source=FixedLocaleSource(locale), **kwargs
        )

    return _make
