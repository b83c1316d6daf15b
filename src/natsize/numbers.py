"""Lenient float parsing shared by the SVG and scale directive parsers."""

import re

# Longest numeric prefix, e.g. "120px" -> "120", " .5e2%" -> ".5e2"
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(text: str) -> float | None:
    """Parse the leading decimal number of ``text``.

    Leading whitespace is skipped and anything after the number is ignored,
    so units such as ``px`` do not make a value invalid.

    Returns:
        The parsed number, or None if ``text`` does not start with one.
    """
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    return float(match.group(1))
