"""Exceptions raised while resolving image widths and scale directives.

None of these escape the transform: they are caught per node and turned
into a warning, leaving that node untouched.
"""


class NaturalSizeError(Exception):
    """Base class for natsize exceptions."""


class SourceUnreadableError(OSError, NaturalSizeError):
    """Raised when an image source cannot be read or decoded."""


class SVGMalformedError(ValueError, NaturalSizeError):
    """Raised when SVG text has no usable root element, width or viewBox."""


class ScaleMalformedError(ValueError, NaturalSizeError):
    """Raised when a scale directive cannot be coerced to a number."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(
            f"DataScaleToNaturalSizeParseError: "
            f"data-scale-to-natural-size={raw!r}, type:{type(raw).__name__}"
        )


__all__ = [
    "NaturalSizeError",
    "SVGMalformedError",
    "ScaleMalformedError",
    "SourceUnreadableError",
]
