import json
from pathlib import Path
from typing import Any, Dict

APP_DIR = Path(__file__).parent.resolve()
LANG_DIR = APP_DIR / "lang"

CONFIG_FILE = APP_DIR / "config.json"

_config: Dict[str, Any] = {}


def load_config() -> None:
    global _config
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                _config = json.load(f)
        except Exception as e:
            raise RuntimeError(f"[!] Critical Error: Failed to load config.json: {e}")
    else:
        raise RuntimeError(
            f"[!] Critical Error: Configuration file missing: {CONFIG_FILE}"
        )


def _get_cfg(section: str, key: str, default: Any = None) -> Any:
    if not _config:
        load_config()
    try:
        return _config[section][key]
    except KeyError:
        if default is not None:
            return default
        raise RuntimeError(
            f"[!] Critical Error: Missing configuration key: [{section}][{key}]"
        )


DEFAULT_LOCALE = _get_cfg("locales", "default", "en")
SUPPORTED_LOCALES = list(_get_cfg("locales", "supported"))
RTL_LANGUAGES = frozenset(_get_cfg("locales", "rtl"))
LOCALE_ENV_OVERRIDE = _get_cfg("locales", "env_override", "SHAREDSTRINGS_LOCALE")

DOCUMENT_PREFIX = _get_cfg("documents", "prefix", "strings_")
DOCUMENT_EXTENSION = _get_cfg("documents", "extension", "json")

MISSING_KEY_FORMAT = _get_cfg("diagnostics", "missing_key", "String not found: {key}")
FORMAT_ERROR_FORMAT = _get_cfg(
    "diagnostics", "format_error", "Error formatting string: {key}"
)
