import json
import re
from pathlib import Path

import pytest
from sharedstrings import constants as const
from sharedstrings.formatting import count_placeholders
from sharedstrings.strings import StringKeys

BASE = Path(__file__).parent.parent
SRC = BASE / "sharedstrings"
LANG = const.LANG_DIR
DEFAULT_DOC = f"{const.DOCUMENT_PREFIX}{const.DEFAULT_LOCALE}.{const.DOCUMENT_EXTENSION}"


def get_src_keys():
    keys = set()
    pat = re.compile(
        r'\b(?:resolver|self|shared)\.get(?:_formatted)?\s*\(\s*["\']([^"\']+)["\']'
    )
    for f in SRC.rglob("*.py"):
        keys.update(pat.findall(f.read_text(encoding="utf-8")))
    return keys


def load_langs():
    d = {}
    if not LANG.exists():
        return {}
    for f in LANG.glob(f"*.{const.DOCUMENT_EXTENSION}"):
        try:
            with open(f, "r", encoding="utf-8") as fp:
                d[f.name] = json.load(fp)
        except Exception:
            pytest.fail(f"Bad JSON {f.name}")
    return d


class TestI18n:
    @pytest.fixture(scope="class")
    def lang_map(self):
        return load_langs()

    def test_string_keys_in_default(self, lang_map):
        missing = set(StringKeys.all().values()) - set(lang_map[DEFAULT_DOC])
        assert not missing, f"Missing in {DEFAULT_DOC}: {missing}"

    def test_src_keys_in_default(self, lang_map):
        missing = get_src_keys() - set(lang_map[DEFAULT_DOC])
        assert not missing, f"Missing in {DEFAULT_DOC}: {missing}"

    def test_default_is_superset(self, lang_map):
        base_k = set(lang_map[DEFAULT_DOC])
        for n, data in lang_map.items():
            extra = set(data) - base_k
            assert not extra, f"{n} has keys absent from {DEFAULT_DOC}: {extra}"

    def test_placeholder_parity(self, lang_map):
        base = lang_map[DEFAULT_DOC]
        for n, data in lang_map.items():
            for key, value in data.items():
                assert count_placeholders(value) == count_placeholders(base[key]), (
                    f"{n}:{key} placeholder count differs from {DEFAULT_DOC}"
                )

    def test_supported_locales_have_documents(self, lang_map):
        for locale in const.SUPPORTED_LOCALES:
            name = f"{const.DOCUMENT_PREFIX}{locale}.{const.DOCUMENT_EXTENSION}"
            assert name in lang_map

    def test_src_scan_only_sees_string_lookups(self):
        assert "name" not in get_src_keys()
