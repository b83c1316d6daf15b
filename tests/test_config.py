"""Tests for natsize configuration."""

import pytest

from natsize.config import Config, ScaleConfig


class TestScaleConfig:
    """Tests for ScaleConfig dataclass."""

    def test_defaults(self):
        scale = ScaleConfig()
        assert scale.prescale == 1
        assert scale.allow_abbreviation is False
        assert scale.data_url_dialect == "general"

    def test_rejects_unknown_dialect(self):
        with pytest.raises(ValueError, match="data_url_dialect"):
            ScaleConfig(data_url_dialect="fancy")

    def test_is_immutable(self):
        scale = ScaleConfig()
        with pytest.raises(AttributeError):
            scale.prescale = 2


class TestConfigLoading:
    """Tests for Config class."""

    def test_load_default_config(self, tmp_path):
        """Loading with no config file returns defaults."""
        config = Config.load(tmp_path / ".natsize" / "config.toml")

        assert config.site.name == "My Documents"
        assert config.build.ignored_folders == ["_private"]
        assert config.scale == ScaleConfig()
        assert config.project_path == tmp_path

    def test_load_scale_section(self, tmp_path):
        config_dir = tmp_path / ".natsize"
        config_dir.mkdir()
        config_path = config_dir / "config.toml"
        config_path.write_text(
            """
[scale]
prescale = 0.8
allow_abbreviation = true
data_url_dialect = "simplified"
"""
        )

        config = Config.load(config_path)

        assert config.scale.prescale == 0.8
        assert config.scale.allow_abbreviation is True
        assert config.scale.data_url_dialect == "simplified"

    def test_integer_prescale_becomes_float(self, tmp_path):
        config_dir = tmp_path / ".natsize"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[scale]\nprescale = 2\n")

        config = Config.load(config_dir / "config.toml")

        assert isinstance(config.scale.prescale, float)

    def test_invalid_dialect_raises(self, tmp_path):
        config_dir = tmp_path / ".natsize"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[scale]\ndata_url_dialect = "x"\n')

        with pytest.raises(ValueError):
            Config.load(config_dir / "config.toml")

    def test_warns_about_unknown_keys(self, tmp_path, capsys):
        config_dir = tmp_path / ".natsize"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[scale]\nprescal = 2\n")

        config = Config.load(config_dir / "config.toml")

        err = capsys.readouterr().err
        assert "Unknown config key 'prescal' in [scale]" in err
        assert "Did you mean 'prescale'?" in err
        assert config.scale.prescale == 1

    def test_find_config_in_parent_dir(self, tmp_path):
        config_dir = tmp_path / ".natsize"
        config_dir.mkdir()
        config_path = config_dir / "config.toml"
        config_path.write_text("[site]\nname = 'Test'")
        child_dir = tmp_path / "subdir" / "nested"
        child_dir.mkdir(parents=True)

        assert Config.find_config(child_dir) == config_path

    def test_find_and_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="natsize init"):
            Config.find_and_load(tmp_path)

    def test_config_paths(self, tmp_path):
        config = Config.load(tmp_path / ".natsize" / "config.toml")

        assert config.get_build_dir() == tmp_path / ".natsize" / "build"
        assert config.get_templates_dir() is None
