"""Natural width of raster images, decoded with Pillow."""

import io
from pathlib import Path

from PIL import Image

from .dataurl import parse_data_url
from .errors import SourceUnreadableError


def _open_target(source: str | bytes | Path):
    """Turn a path, raw bytes or data URL into something Image.open accepts."""
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, str) and source.lstrip().lower().startswith("data:"):
        parsed = parse_data_url(source)
        if parsed is None:
            raise ValueError("malformed data URL")
        return io.BytesIO(parsed.body)
    return source


def read_raster_width(source: str | bytes | Path) -> int:
    """Return the pixel width of a raster image.

    Only the image header is read; pixel data is never decoded.

    Args:
        source: File path, encoded image bytes, or a ``data:`` URL

    Raises:
        SourceUnreadableError: If the image cannot be opened or identified
    """
    label = "<bytes>" if isinstance(source, bytes) else _shorten(str(source))
    try:
        with Image.open(_open_target(source)) as img:
            return img.width
    except Exception as e:
        raise SourceUnreadableError(f"Failed to read image {label}: {e}") from e


def _shorten(text: str, limit: int = 80) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."
