import locale
import os
import re
from typing import Callable, Iterable, Optional

from . import constants as const
from .logger import get_logger

logger = get_logger()

LocaleTag = str
HostDirection = Callable[[LocaleTag], Optional[bool]]

_SUBTAG_RE = re.compile(r"^[a-z]{2,8}$")
_NEUTRAL_LOCALES = {"c", "posix"}

# gettext precedence
ENV_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def normalize_tag(raw: Optional[str]) -> Optional[LocaleTag]:
    """Reduce ``ar_EG.UTF-8``, ``ar-EG`` or ``sr@latin`` to the language subtag."""
    if not raw:
        return None
    tag = raw.strip()
    for sep in (".", "@", "_", "-"):
        tag = tag.split(sep, 1)[0]
    tag = tag.lower()
    if tag in _NEUTRAL_LOCALES or not _SUBTAG_RE.match(tag):
        return None
    return tag


class EnvironmentLocaleSource:
    """Reads the display locale of the host environment on every call."""

    def __init__(
        self,
        default_locale: LocaleTag = const.DEFAULT_LOCALE,
        variables: Iterable[str] = ENV_VARIABLES,
        override_variable: Optional[str] = const.LOCALE_ENV_OVERRIDE,
    ):
        self.default_locale = default_locale
        self.variables = tuple(variables)
        self.override_variable = override_variable

    def _candidates(self):
        if self.override_variable:
            yield os.environ.get(self.override_variable)
        for name in self.variables:
            value = os.environ.get(name)
            if name == "LANGUAGE" and value:
                # colon separated priority list
                value = value.split(":", 1)[0]
            yield value
        try:
            yield locale.getlocale()[0]
        except ValueError:
            yield None

    def __call__(self) -> LocaleTag:
        for candidate in self._candidates():
            tag = normalize_tag(candidate)
            if tag:
                return tag
        return self.default_locale


class FixedLocaleSource:
    def __init__(self, tag: LocaleTag):
        self.tag = tag

    def __call__(self) -> LocaleTag:
        return self.tag


def is_rtl_language(
    tag: Optional[LocaleTag], host_direction: Optional[HostDirection] = None
) -> bool:
    tag = normalize_tag(tag)
    if tag is None:
        return False
    if tag in const.RTL_LANGUAGES:
        return True
    if host_direction is not None:
        try:
            return bool(host_direction(tag))
        except Exception as e:
            logger.warning(f"[!] Host direction lookup failed for '{tag}': {e}")
            return False
    return False
