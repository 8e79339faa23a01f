"""Render string tables as native resource files.

These helpers are for build-time tooling: they never take part in runtime
lookup. Each renderer has a matching reader so exported files can be checked
against the table they came from.
"""

import re
import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path
from typing import Dict, Union

from . import constants as const
from .locale_utils import LocaleTag
from .logger import get_logger
from .store import ResourceStore, StringTable

logger = get_logger()


class ExportTarget(Enum):
    ANDROID_XML = "android"
    APPLE_STRINGS = "ios"


APPLE_HEADER = "/* Generated Localizable.strings from shared resources */"

_ANDROID_BACKSLASH = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_XML_ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}
_BACKSLASH_CODES = {"n": "\n", "r": "\r", "t": "\t"}

_STRING_SPEC_RE = re.compile(r"%%|%(\d+\$)?s")
_OBJECT_SPEC_RE = re.compile(r"%%|%(\d+\$)?@")
_BACKSLASH_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_APPLE_TOKEN_RE = re.compile(
    r'/\*.*?\*/|//[^\n]*|"((?:[^"\\]|\\.)*)"\s*=\s*"((?:[^"\\]|\\.)*)"\s*;',
    re.DOTALL,
)


def _unescape_code(code: str) -> str:
    if len(code) == 5:
        return chr(int(code[1:], 16))
    return _BACKSLASH_CODES.get(code, code)


def _unescape_backslashes(text: str) -> str:
    return _BACKSLASH_RE.sub(lambda m: _unescape_code(m.group(1)), text)


def _escape_xml(text: str) -> str:
    return "".join(_XML_ENTITIES.get(ch, ch) for ch in text)


def _escape_apple(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _escape_android_char(ch: str) -> str:
    if ch in _ANDROID_BACKSLASH:
        return _ANDROID_BACKSLASH[ch]
    if ch < " " or ch in "\ufffe\uffff":
        # not allowed in XML 1.0 text
        return f"\\u{ord(ch):04x}"
    return ch


def _escape_android(value: str) -> str:
    escaped = "".join(_escape_android_char(ch) for ch in value)
    if escaped[:1] in ("@", "?"):
        # would otherwise be read as a resource reference
        escaped = "\\" + escaped
    return _escape_xml(escaped)


def _to_apple_specifiers(value: str) -> str:
    return _STRING_SPEC_RE.sub(
        lambda m: m.group() if m.group() == "%%" else f"%{m.group(1) or ''}@", value
    )


def _from_apple_specifiers(value: str) -> str:
    return _OBJECT_SPEC_RE.sub(
        lambda m: m.group() if m.group() == "%%" else f"%{m.group(1) or ''}s", value
    )


def render_android_xml(table: StringTable) -> str:
    lines = ['<?xml version="1.0" encoding="utf-8"?>', "<resources>"]
    for key, value in table.items():
        lines.append(f'    <string name="{_escape_xml(key)}">{_escape_android(value)}</string>')
    lines.append("</resources>")
    return "\n".join(lines) + "\n"


def render_apple_strings(table: StringTable) -> str:
    lines = [APPLE_HEADER, ""]
    for key in sorted(table):
        value = _escape_apple(_to_apple_specifiers(table[key]))
        lines.append(f'"{_escape_apple(key)}" = "{value}";')
    return "\n".join(lines) + "\n"


def render(table: StringTable, target: ExportTarget) -> str:
    if target is ExportTarget.ANDROID_XML:
        return render_android_xml(table)
    if target is ExportTarget.APPLE_STRINGS:
        return render_apple_strings(table)
    raise ValueError(f"Unsupported export target: {target}")


def parse_android_xml(text: str) -> Dict[str, str]:
    root = ET.fromstring(text.encode("utf-8"))
    strings = {}
    for node in root.findall("string"):
        name = node.get("name")
        if name:
            strings[name] = _unescape_backslashes(node.text or "")
    return strings


def parse_apple_strings(text: str) -> Dict[str, str]:
    strings = {}
    for match in _APPLE_TOKEN_RE.finditer(text):
        key, value = match.group(1), match.group(2)
        if key is None:
            continue  # comment
        strings[_unescape_backslashes(key)] = _from_apple_specifiers(
            _unescape_backslashes(value)
        )
    return strings


def export_file_name(
    locale: LocaleTag, target: ExportTarget, default_locale: LocaleTag
) -> str:
    if target is ExportTarget.ANDROID_XML:
        return "strings.xml" if locale == default_locale else f"strings_{locale}.xml"
    return (
        "Localizable.strings"
        if locale == default_locale
        else f"Localizable_{locale}.strings"
    )


def export_locale(
    store: ResourceStore,
    locale: LocaleTag,
    target: ExportTarget,
    out_dir: Union[str, Path],
    default_locale: LocaleTag = const.DEFAULT_LOCALE,
) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    table = store.load(locale)
    path = out_dir / export_file_name(locale, target, default_locale)
    path.write_text(render(table, target), encoding="utf-8")

    logger.info(f"[+] Generated {path.name} ({len(table)} strings)")
    return path
