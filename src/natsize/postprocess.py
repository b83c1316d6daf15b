"""Post-processing of rendered HTML.

Applies the natural-size transform to HTML strings and files:
- Parses the HTML with BeautifulSoup
- Writes ``width`` on images carrying a scale directive
- Re-serializes only when something changed
"""

from pathlib import Path

from bs4 import BeautifulSoup

from .config import ScaleConfig
from .logging import Sink
from .transform import SourceFile, ScaleToNaturalSize


def scale_html(
    html_content: str,
    source: SourceFile,
    scale: ScaleConfig | None = None,
    logger: Sink | None = None,
) -> tuple[str, int]:
    """Scale images in an HTML fragment or document.

    Args:
        html_content: HTML to process
        source: File the HTML (or its markdown) came from; relative ``src``
            values resolve against its directory
        scale: Transform options
        logger: Diagnostic sink

    Returns:
        Tuple of (html, written_count). The input string is returned
        unchanged when no width was written. Otherwise the whole document
        is re-serialized by html.parser, which also normalizes untouched
        markup (``<br />`` becomes ``<br/>``, entities such as ``&rsquo;``
        become literal characters).
    """
    soup = BeautifulSoup(html_content, "html.parser")
    written = ScaleToNaturalSize(scale, logger)(soup, source)
    if not written:
        return html_content, 0
    return str(soup), written


def process_html_file(
    html_file: Path,
    scale: ScaleConfig | None = None,
    source: SourceFile = None,
) -> bool:
    """Scale images of an HTML file in place.

    Args:
        html_file: Path to HTML file
        scale: Transform options
        source: Originating file for relative paths (default: html_file)

    Returns:
        True if file was modified, False otherwise
    """
    from .logging import debug, error

    try:
        content = html_file.read_text(encoding="utf-8")
        scaled_content, written = scale_html(content, source or html_file, scale)

        if written:
            html_file.write_text(scaled_content, encoding="utf-8")
            debug(f"  Scaled: {html_file} ({written} images)")
            return True
        return False

    except Exception as e:
        error(f"Processing {html_file}: {e}")
        return False
