"""Rewrite image widths in a parsed HTML tree to match their natural size.

Elements carrying both ``src`` and a scale directive get a numeric
``width`` attribute of ``natural width * prescale * scale``. Nodes whose
image or directive cannot be resolved are left exactly as they were and
a warning is logged; nothing is raised to the caller.
"""

import os
from collections.abc import Sequence
from pathlib import Path

from bs4 import Tag

from .config import ScaleConfig
from .directive import directive_value, has_directive, parse_scale
from .errors import ScaleMalformedError
from .logging import Sink, document_logger, get_logger
from .resolver import resolve_width

SourceFile = str | os.PathLike | Sequence[str | os.PathLike] | None


def current_path(source: SourceFile) -> Path | None:
    """Path of the file the tree came from.

    ``source`` may be a single path or a file history, in which case the
    most recent (last) entry is used.
    """
    if source is None:
        return None
    if isinstance(source, (str, os.PathLike)):
        return Path(source)
    if not source:
        return None
    return Path(source[-1])


def is_candidate(node, config: ScaleConfig) -> bool:
    """True for elements with a ``src`` and a directive visible under config."""
    return isinstance(node, Tag) and "src" in node.attrs and has_directive(node.attrs, config)


def select_candidates(tree: Tag, config: ScaleConfig) -> list[Tag]:
    """Collect eligible elements in document order.

    The whole list is built before anything is written back.
    """
    candidates = [tree] if is_candidate(tree, config) else []
    candidates.extend(tree.find_all(lambda tag: is_candidate(tag, config)))
    return candidates


def _as_number(value: float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ScaleToNaturalSize:
    """Transform that scales ``<img>``-like elements to their natural width.

    Args:
        config: Transform options (defaults to ScaleConfig())
        logger: Where diagnostics go (defaults to the natsize logger)
    """

    def __init__(
        self,
        config: ScaleConfig | None = None,
        logger: Sink | None = None,
    ):
        self.config = config or ScaleConfig()
        self.logger = logger if logger is not None else get_logger()

    def __call__(self, tree: Tag, source: SourceFile) -> int:
        """Apply the transform to ``tree`` in place.

        Args:
            tree: Parsed document (a BeautifulSoup object or any Tag)
            source: Originating file path or file history

        Returns:
            Number of elements whose width was written
        """
        path = current_path(source)
        if path is None:
            return 0
        base_dir = path.parent
        logger = document_logger(self.logger, path)

        written = 0
        for tag in select_candidates(tree, self.config):
            if self.scale_element(tag, base_dir, logger):
                written += 1
        return written

    def scale_element(self, tag: Tag, base_dir: Path, logger: Sink | None = None) -> bool:
        """Resolve one element and write its width. Returns True if written."""
        logger = logger or self.logger
        src = str(tag["src"])
        width = resolve_width(
            src, base_dir, dialect=self.config.data_url_dialect, logger=logger
        )

        # Parsed even when the width is unknown so bad directives are reported
        try:
            multiplier = parse_scale(
                directive_value(tag.attrs, self.config), self.config.prescale
            )
        except ScaleMalformedError as e:
            logger.warning(str(e))
            return False

        if width is None:
            return False

        tag["width"] = _as_number(width * multiplier)
        logger.debug(f"  Scaled: {_label(src)} -> width={tag['width']}")
        return True


def _label(src: str, limit: int = 60) -> str:
    return src if len(src) <= limit else src[: limit - 3] + "..."


def scale_to_natural_size(
    tree: Tag,
    source: SourceFile,
    config: ScaleConfig | None = None,
    logger: Sink | None = None,
) -> int:
    """Functional form of ScaleToNaturalSize(config, logger)(tree, source)."""
    return ScaleToNaturalSize(config, logger)(tree, source)
