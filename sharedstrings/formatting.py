import re
from typing import Any, Sequence

# %s, %d and %@ with an optional "N$" index, or a literal "%%"
PLACEHOLDER_RE = re.compile(r"%%|%(?:\d+\$)?[sd@]")


class PlaceholderError(ValueError):
    pass


def count_placeholders(template: str) -> int:
    return sum(1 for m in PLACEHOLDER_RE.finditer(template) if m.group() != "%%")


def substitute(template: str, args: Sequence[Any]) -> str:
    """Replace placeholders with ``args`` strictly left to right.

    The marker kind and any explicit index are ignored: the Nth marker takes
    the Nth argument. Surplus arguments are ignored.
    """
    needed = count_placeholders(template)
    if needed > len(args):
        raise PlaceholderError(
            f"template expects {needed} argument(s), got {len(args)}"
        )

    rendered = []
    for arg in args[:needed]:
        try:
            rendered.append(str(arg))
        except Exception as e:
            raise PlaceholderError(f"{type(arg).__name__} argument cannot be rendered") from e

    position = iter(rendered)

    def _replace(match: "re.Match[str]") -> str:
        if match.group() == "%%":
            return "%"
        return next(position)

    return PLACEHOLDER_RE.sub(_replace, template)
