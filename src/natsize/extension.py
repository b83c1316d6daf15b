#!/usr/bin/env python3
"""
Markdown extension that sizes images to their natural width.
Converts ![alt](fig.svg){: data-nscale="50%" } to <img ... width="...">
"""

from markdown import Extension
from markdown.postprocessors import Postprocessor

from .config import DIALECT_GENERAL, ScaleConfig
from .postprocess import scale_html


class NaturalSizePostprocessor(Postprocessor):
    """Postprocessor applying the natural-size transform to rendered HTML."""

    def __init__(self, md, scale: ScaleConfig, source_path: str):
        super().__init__(md)
        self.scale = scale
        self.source_path = source_path

    def run(self, text):
        """Scale images in the final HTML string."""
        if not self.source_path:
            return text
        html, _ = scale_html(text, self.source_path, self.scale)
        return html


class NaturalSizeExtension(Extension):
    """Markdown extension scaling images to their natural size."""

    def __init__(self, **kwargs):
        self.config = {
            "prescale": [1.0, "Multiplier applied to every scale directive"],
            "allow_abbreviation": [False, "Accept data-nscale as an alias"],
            "data_url_dialect": [DIALECT_GENERAL, "'general' or 'simplified'"],
            "source_path": ["", "Path of the markdown file being rendered"],
        }
        super().__init__(**kwargs)

    def scale_config(self) -> ScaleConfig:
        return ScaleConfig(
            prescale=float(self.getConfig("prescale")),
            allow_abbreviation=bool(self.getConfig("allow_abbreviation")),
            data_url_dialect=self.getConfig("data_url_dialect"),
        )

    def extendMarkdown(self, md):
        """Register the postprocessor with markdown."""
        processor = NaturalSizePostprocessor(
            md, self.scale_config(), str(self.getConfig("source_path"))
        )
        # Lower than raw_html (30) so stashed <img> tags are back in place
        md.postprocessors.register(processor, "natural_size", 5)


def makeExtension(**kwargs):
    """Entry point for markdown extension."""
    return NaturalSizeExtension(**kwargs)
