"""Markdown processing utilities for natsize."""

import re
from pathlib import Path

import frontmatter
import markdown

from .config import ScaleConfig
from .extension import NaturalSizeExtension

# Markdown extensions configuration; "extra" brings attr_list for {: ... } on images
MARKDOWN_EXTENSIONS = [
    "extra",
    "sane_lists",
    "smarty",
    "toc",
]

EXTENSION_CONFIGS = {
    "toc": {
        "permalink": "#",
        "permalink_class": "header-anchor",
        "permalink_title": "Link to this section",
    },
}

_HEADING_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)


def parse_markdown_file(filepath: Path) -> tuple[dict, str]:
    """Parse a markdown file with YAML frontmatter.

    Args:
        filepath: Path to the markdown file

    Returns:
        Tuple of (metadata dict, markdown content string)
    """
    from .logging import warning

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            post = frontmatter.load(f)
        return dict(post.metadata), post.content
    except Exception as e:
        warning(f"YAML parsing error in {filepath}: {e}")
        return {}, ""


def extract_title(meta: dict, markdown_content: str, fallback: str) -> str:
    """Page title from frontmatter, else the first level-1 heading, else fallback."""
    if meta.get("title"):
        return str(meta["title"])
    match = _HEADING_PATTERN.search(markdown_content)
    if match:
        return match.group(1)
    return fallback


def get_markdown_converter(
    source_path: Path | str, scale: ScaleConfig | None = None
) -> markdown.Markdown:
    """Create a Markdown converter that sizes images relative to source_path."""
    scale = scale or ScaleConfig()
    extension_configs = {k: v.copy() for k, v in EXTENSION_CONFIGS.items()}

    return markdown.Markdown(
        extensions=[
            *MARKDOWN_EXTENSIONS,
            NaturalSizeExtension(
                prescale=scale.prescale,
                allow_abbreviation=scale.allow_abbreviation,
                data_url_dialect=scale.data_url_dialect,
                source_path=str(source_path),
            ),
        ],
        extension_configs=extension_configs,
    )


def render_markdown(
    content: str, source_path: Path | str, scale: ScaleConfig | None = None
) -> str:
    """Render markdown to HTML with image widths scaled to natural size.

    Args:
        content: Markdown content
        source_path: Path of the markdown file (relative images resolve
            against its directory)
        scale: Transform options

    Returns:
        HTML string
    """
    md = get_markdown_converter(source_path, scale)
    return md.convert(content)
