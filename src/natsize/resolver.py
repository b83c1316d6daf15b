"""Resolve the natural width of an image reference.

A reference is either a path relative to the document's directory or a
``data:`` URL. SVG sources are sized from their markup, everything else
goes through the raster decoder.
"""

import math
from pathlib import Path

from .config import DIALECT_GENERAL, DIALECT_SIMPLIFIED
from .dataurl import decode_text, parse_data_url
from .errors import NaturalSizeError, SourceUnreadableError
from .logging import Sink, get_logger
from .raster import read_raster_width
from .svg import get_width_from_svg

SVG_MIME_TYPE = "image/svg+xml"
SVG_EXTENSION = ".svg"


def _width_from_data_url(source_ref: str, dialect: str) -> float | None:
    """Width for a data URL reference, or None if it is to be treated as a path."""
    if dialect == DIALECT_SIMPLIFIED:
        if source_ref.startswith("data:image/"):
            return read_raster_width(source_ref)
        return None

    parsed = parse_data_url(source_ref)
    if parsed is None:
        return None
    if parsed.mime_type == SVG_MIME_TYPE:
        return get_width_from_svg(decode_text(parsed))
    return read_raster_width(parsed.body)


def _width_from_path(path: Path) -> float:
    if path.suffix.lower() == SVG_EXTENSION:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            raise SourceUnreadableError(f"Failed to read SVG {path}: {e}") from e
        return get_width_from_svg(content)
    return read_raster_width(path)


def natural_width(
    source_ref: str, base_dir: Path, dialect: str = DIALECT_GENERAL
) -> float:
    """Determine the natural width of an image reference.

    Args:
        source_ref: Value of the ``src`` attribute
        base_dir: Directory of the document the reference appears in
        dialect: Data URL handling policy ("general" or "simplified")

    Returns:
        Width in pixels

    Raises:
        NaturalSizeError: If the source cannot be read or sized
    """
    width = _width_from_data_url(source_ref, dialect)
    if width is None:
        # "/img/a.png" stays under base_dir rather than the filesystem root
        width = _width_from_path(base_dir / source_ref.lstrip("/"))
    return width


def resolve_width(
    source_ref: str,
    base_dir: Path,
    dialect: str = DIALECT_GENERAL,
    logger: Sink | None = None,
) -> float | None:
    """Like natural_width(), but failures become a warning and None.

    Non-positive or non-finite widths are treated as unknown too.
    """
    if logger is None:
        logger = get_logger()

    try:
        width = natural_width(source_ref, base_dir, dialect)
    except NaturalSizeError as e:
        logger.warning(str(e))
        return None

    if not math.isfinite(width) or width <= 0:
        logger.warning(f"Ignoring non-positive natural width {width} for {source_ref!r}")
        return None
    return width
