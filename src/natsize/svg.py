"""Natural width of SVG documents."""

import re
import xml.etree.ElementTree as ET

from .errors import SVGMalformedError
from .numbers import parse_float

_WHITESPACE = re.compile(r"\s+")


def get_width_from_svg(content: str) -> float:
    """Read the intrinsic width of an SVG document.

    The root ``width`` attribute wins; otherwise the third number of
    ``viewBox`` (``minX minY width height``) is used.

    Args:
        content: SVG source text

    Returns:
        Width in user units (pixels)

    Raises:
        SVGMalformedError: If the text does not parse or carries no usable size
    """
    # An empty document is a ParseError ("no element found") too
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise SVGMalformedError(
            "Failed to parse SVG: No valid SVG element found."
        ) from e

    width_attr = root.get("width")
    if width_attr is not None:
        width = parse_float(width_attr)
        if width is None:
            raise SVGMalformedError(f'Invalid width attribute value: "{width_attr}".')
        return width

    viewbox_attr = root.get("viewBox")
    if viewbox_attr is not None:
        values = [parse_float(v) for v in _WHITESPACE.split(viewbox_attr.strip())]
        if len(values) != 4 or any(v is None for v in values):
            raise SVGMalformedError(
                f'Invalid viewBox attribute value: "{viewbox_attr}". '
                "It must have four valid numbers."
            )
        _, _, width, _ = values
        return width

    raise SVGMalformedError("No valid width or viewBox attribute found in SVG.")
