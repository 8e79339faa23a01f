import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Set, Tuple, Union

from . import constants as const
from .locale_utils import LocaleTag, normalize_tag
from .logger import get_logger

logger = get_logger()

StringTable = Mapping[str, str]

EMPTY_TABLE: StringTable = MappingProxyType({})


def make_table(pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> StringTable:
    return MappingProxyType(dict(pairs))


class ResourceStore(Protocol):
    def load(self, locale: LocaleTag) -> StringTable:
        ...

    def keys(self, locale: LocaleTag) -> Set[str]:
        ...


def _parse_document(data: Any, path: Path) -> Dict[str, str]:
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} is not a key/value object")
    for key, value in data.items():
        if not key:
            raise ValueError(f"{path.name} contains an empty key")
        if not isinstance(value, str):
            raise ValueError(f"{path.name}: value for '{key}' is not a string")
    return data


class DocumentStore:
    """Reads ``strings_<locale>.json`` documents from a bundled directory."""

    def __init__(
        self,
        directory: Union[str, Path] = const.LANG_DIR,
        default_locale: LocaleTag = const.DEFAULT_LOCALE,
        prefix: str = const.DOCUMENT_PREFIX,
        extension: str = const.DOCUMENT_EXTENSION,
    ):
        self.directory = Path(directory)
        self.default_locale = default_locale
        self.prefix = prefix
        self.extension = extension

    def document_path(self, locale: LocaleTag) -> Path:
        return self.directory / f"{self.prefix}{locale}.{self.extension}"

    def _read(self, locale: LocaleTag) -> Dict[str, str]:
        if normalize_tag(locale) != locale:
            raise ValueError(f"invalid locale tag: {locale!r}")
        path = self.document_path(locale)
        with open(path, "r", encoding="utf-8") as f:
            return _parse_document(json.load(f), path)

    def load(self, locale: LocaleTag) -> StringTable:
        if locale != self.default_locale:
            try:
                table = make_table(self._read(locale))
                logger.debug(f"[*] Loaded {len(table)} strings for '{locale}'")
                return table
            except (OSError, ValueError, RecursionError) as e:
                logger.warning(
                    f"[!] Failed to load language {locale}, using fallback: {e}"
                )

        try:
            table = make_table(self._read(self.default_locale))
            logger.debug(
                f"[*] Loaded {len(table)} strings for '{self.default_locale}'"
            )
            return table
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(
                f"[!] Failed to load fallback language {self.default_locale}: {e}"
            )
            return EMPTY_TABLE

    def keys(self, locale: LocaleTag) -> Set[str]:
        return set(self.load(locale))

    def available_locales(self) -> List[LocaleTag]:
        if not self.directory.is_dir():
            return []

        locales = []
        for f in self.directory.glob(f"{self.prefix}*.{self.extension}"):
            tag = f.stem[len(self.prefix):]
            if normalize_tag(tag) == tag:
                locales.append(tag)

        locales.sort(key=lambda x: (0 if x == self.default_locale else 1, x))
        return locales


class InlineStore:
    """Serves compiled-in tables; unsupported locales get the default table."""

    def __init__(
        self,
        tables: Mapping[LocaleTag, Mapping[str, str]],
        default_locale: LocaleTag = const.DEFAULT_LOCALE,
    ):
        if default_locale not in tables:
            raise ValueError(f"inline tables have no '{default_locale}' entry")
        self.default_locale = default_locale
        self._tables: Dict[LocaleTag, StringTable] = {
            tag: make_table(table) for tag, table in tables.items()
        }

    @classmethod
    def from_documents(
        cls,
        directory: Union[str, Path] = const.LANG_DIR,
        default_locale: LocaleTag = const.DEFAULT_LOCALE,
        locales: Optional[Iterable[LocaleTag]] = None,
    ) -> "InlineStore":
        documents = DocumentStore(directory, default_locale)
        tags = list(locales) if locales is not None else documents.available_locales()
        if default_locale not in tags:
            tags.insert(0, default_locale)
        return cls({tag: documents.load(tag) for tag in tags}, default_locale)

    @property
    def supported_locales(self) -> List[LocaleTag]:
        return list(self._tables)

    def load(self, locale: LocaleTag) -> StringTable:
        return self._tables.get(locale, self._tables[self.default_locale])

    def keys(self, locale: LocaleTag) -> Set[str]:
        return set(self.load(locale))
