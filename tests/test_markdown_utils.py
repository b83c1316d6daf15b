"""Tests for natsize markdown utilities."""

from natsize import markdown_utils
from natsize.config import ScaleConfig


class TestParseMarkdownFile:
    """Tests for parse_markdown_file() function."""

    def test_parses_frontmatter(self, tmp_path):
        """Correctly parses YAML frontmatter."""
        md_file = tmp_path / "test.md"
        md_file.write_text(
            """---
title: Test Page
tags:
  - test
---

# Content

This is the content.
"""
        )

        meta, content = markdown_utils.parse_markdown_file(md_file)

        assert meta["title"] == "Test Page"
        assert meta["tags"] == ["test"]
        assert "# Content" in content

    def test_handles_no_frontmatter(self, tmp_path):
        md_file = tmp_path / "test.md"
        md_file.write_text("# Just Content\n\nNo frontmatter here.")

        meta, content = markdown_utils.parse_markdown_file(md_file)

        assert meta == {}
        assert "# Just Content" in content

    def test_invalid_yaml_warns(self, tmp_path, capsys):
        md_file = tmp_path / "test.md"
        md_file.write_text("---\ntitle: [unclosed\n---\nBody")

        meta, content = markdown_utils.parse_markdown_file(md_file)

        assert (meta, content) == ({}, "")
        assert "YAML parsing error" in capsys.readouterr().err


class TestExtractTitle:
    """Tests for extract_title() function."""

    def test_prefers_frontmatter(self):
        assert markdown_utils.extract_title({"title": "Meta"}, "# Heading", "file") == "Meta"

    def test_uses_first_heading(self):
        assert markdown_utils.extract_title({}, "intro\n\n# Heading\n", "file") == "Heading"

    def test_falls_back(self):
        assert markdown_utils.extract_title({}, "no heading", "file") == "file"


class TestRenderMarkdown:
    """Tests for render_markdown() function."""

    def test_scales_images_relative_to_source(self, tmp_path, make_png):
        make_png("figs/plot.png", 400, 300)
        content = '![Plot](figs/plot.png){: data-scale-to-natural-size="25%" }'

        html = markdown_utils.render_markdown(content, tmp_path / "doc.md")

        assert 'width="100"' in html

    def test_uses_scale_config(self, tmp_path):
        (tmp_path / "a.svg").write_text('<svg width="50"/>')
        content = '![a](a.svg){: data-nscale="2" }'

        html = markdown_utils.render_markdown(
            content, tmp_path / "doc.md", ScaleConfig(allow_abbreviation=True, prescale=0.5)
        )

        assert 'width="50"' in html

    def test_renders_extras(self, tmp_path):
        content = "# Title\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"

        html = markdown_utils.render_markdown(content, tmp_path / "doc.md")

        assert "<table>" in html
        assert 'id="title"' in html
