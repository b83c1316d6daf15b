"""Tests for templates module."""

from natsize.templates import copy_default_templates, get_environment, render_page


class TestGetEnvironment:
    """Tests for template lookup order."""

    def test_bundled_page(self, tmp_path):
        env = get_environment(tmp_path / "missing")
        html = render_page(env, "Notes", "<p>hi</p>", {"language": "en", "site_name": "Docs"})

        assert "<title>Notes - Docs</title>" in html
        assert "<p>hi</p>" in html

    def test_user_template_overrides_bundled(self, tmp_path):
        (tmp_path / "page.html").write_text("custom {{ title }}")
        env = get_environment(tmp_path)

        assert render_page(env, "Notes", "", {}) == "custom Notes"


class TestCopyDefaultTemplates:
    """Tests for copy_default_templates function."""

    def test_copies_page(self, tmp_path):
        created = copy_default_templates(tmp_path / "templates")

        assert created == [tmp_path / "templates" / "page.html"]
        assert "{{ content }}" in created[0].read_text()
        assert not (tmp_path / "templates" / "__init__.py").exists()

    def test_does_not_overwrite_without_force(self, tmp_path):
        (tmp_path / "page.html").write_text("custom")

        assert copy_default_templates(tmp_path) == []
        assert (tmp_path / "page.html").read_text() == "custom"

    def test_overwrites_with_force(self, tmp_path):
        (tmp_path / "page.html").write_text("custom")

        copy_default_templates(tmp_path, force=True)

        assert (tmp_path / "page.html").read_text() != "custom"
