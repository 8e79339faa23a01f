from pathlib import Path
from typing import Any, Callable, Dict, Optional, Set, Union

from . import constants as const
from .formatting import PlaceholderError, substitute
from .inline_tables import INLINE_TABLES
from .locale_utils import (
    EnvironmentLocaleSource,
    HostDirection,
    LocaleTag,
    is_rtl_language,
    normalize_tag,
)
from .logger import get_logger
from .store import DocumentStore, InlineStore, ResourceStore, StringTable

logger = get_logger()


class StringResolver:
    """Looks up localized strings for the host's current locale.

    Lookup goes active locale, then default locale, then a visible
    ``String not found: <key>`` marker. Nothing here raises on a bad key,
    a missing document or a broken template.
    """

    def __init__(
        self,
        store: ResourceStore,
        locale_source: Optional[Callable[[], Optional[str]]] = None,
        default_locale: LocaleTag = const.DEFAULT_LOCALE,
        host_direction: Optional[HostDirection] = None,
    ):
        self.store = store
        self.locale_source = locale_source or EnvironmentLocaleSource(default_locale)
        self.default_locale = default_locale
        self.host_direction = host_direction
        self._tables: Dict[LocaleTag, StringTable] = {}

    def table(self, locale: LocaleTag) -> StringTable:
        cached = self._tables.get(locale)
        if cached is not None:
            return cached
        # a racing caller may load the same locale twice; first insert wins
        return self._tables.setdefault(locale, self.store.load(locale))

    def _lookup(self, key: str) -> Optional[str]:
        active = self.current_locale()
        value = self.table(active).get(key)
        if value is None and active != self.default_locale:
            value = self.table(self.default_locale).get(key)
        return value

    def get(self, key: str) -> str:
        value = self._lookup(key)
        if value is None:
            logger.warning(f"[!] Missing string key: {key}")
            return const.MISSING_KEY_FORMAT.format(key=key)
        return value

    def get_formatted(self, key: str, *args: Any) -> str:
        template = self._lookup(key)
        if template is None:
            logger.warning(f"[!] Missing string key: {key}")
            return const.MISSING_KEY_FORMAT.format(key=key)
        try:
            return substitute(template, args)
        except PlaceholderError as e:
            logger.warning(f"[!] Failed to format '{key}': {e}")
            return const.FORMAT_ERROR_FORMAT.format(key=key)

    def current_locale(self) -> LocaleTag:
        return normalize_tag(self.locale_source()) or self.default_locale

    def is_right_to_left(self) -> bool:
        return is_rtl_language(self.current_locale(), self.host_direction)

    def all_keys(self) -> Set[str]:
        return set(self.table(self.default_locale))


def create_string_resolver(
    backend: str = "document",
    locale_source: Optional[Callable[[], Optional[str]]] = None,
    directory: Optional[Union[str, Path]] = None,
    default_locale: LocaleTag = const.DEFAULT_LOCALE,
    host_direction: Optional[HostDirection] = None,
) -> StringResolver:
    if backend == "document":
        store: ResourceStore = DocumentStore(directory or const.LANG_DIR, default_locale)
    elif backend == "inline":
        if directory is not None:
            store = InlineStore.from_documents(directory, default_locale)
        else:
            store = InlineStore(INLINE_TABLES, default_locale)
    else:
        raise ValueError(f"Unknown string backend: {backend}")

    return StringResolver(
        store,
        locale_source=locale_source,
        default_locale=default_locale,
        host_direction=host_direction,
    )
