"""Scale directives authored on image elements.

``data-scale-to-natural-size`` (or its alias ``data-nscale``) tells the
transform how to scale an image's natural width. Values are loosely typed:
attributes parsed from HTML are strings, but trees built programmatically
may carry booleans, numbers or lists.
"""

from .config import ScaleConfig
from .errors import ScaleMalformedError
from .numbers import parse_float

SCALE_ATTRIBUTE = "data-scale-to-natural-size"
SCALE_ALIAS = "data-nscale"

# Directive attribute absent from the node
MISSING = object()


def has_directive(attrs: dict, config: ScaleConfig) -> bool:
    """True if the attribute mapping carries a directive visible under config."""
    return SCALE_ATTRIBUTE in attrs or (
        config.allow_abbreviation and SCALE_ALIAS in attrs
    )


def directive_value(attrs: dict, config: ScaleConfig) -> object:
    """Pick the raw directive value, preferring the alias when it is enabled.

    Returns:
        The raw attribute value, or MISSING
    """
    if config.allow_abbreviation and SCALE_ALIAS in attrs:
        return attrs[SCALE_ALIAS]
    return attrs.get(SCALE_ATTRIBUTE, MISSING)


def _string_base(raw: str) -> float | None:
    if raw == "":
        return 1.0
    if raw.endswith("%"):
        value = parse_float(raw[:-1])
        return None if value is None else value / 100
    return parse_float(raw)


def parse_scale(raw: object, prescale: float = 1) -> float:
    """Turn a raw directive value into a width multiplier.

    ==================  ===========================
    raw                 base value
    ==================  ===========================
    MISSING / None      rejected
    False               rejected
    list / tuple        rejected
    True                1
    int / float         the number itself
    ""                  1
    "150%"              1.5
    "1.5"               1.5
    other strings       rejected
    ==================  ===========================

    Args:
        raw: Directive value as found on the node
        prescale: Global multiplier applied on top of the directive

    Returns:
        ``prescale * base``

    Raises:
        ScaleMalformedError: If the value is rejected
    """
    if raw is MISSING or raw is None or raw is False:
        raise ScaleMalformedError(None if raw is MISSING else raw)
    if isinstance(raw, (list, tuple)):
        raise ScaleMalformedError(raw)

    if raw is True:
        base = 1.0
    elif isinstance(raw, (int, float)):
        base = raw
    elif isinstance(raw, str):
        base = _string_base(raw)
        if base is None:
            raise ScaleMalformedError(raw)
    else:
        raise ScaleMalformedError(raw)

    return prescale * base
