"""Configuration loading and management for natsize."""

import difflib
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

CONFIG_DIR = ".natsize"
CONFIG_FILE = "config.toml"

# How data: URLs in src attributes are handled
DIALECT_GENERAL = "general"  # parse the URL, SVG payloads resolved as SVG
DIALECT_SIMPLIFIED = "simplified"  # any data:image/ goes straight to the raster decoder
DATA_URL_DIALECTS = (DIALECT_GENERAL, DIALECT_SIMPLIFIED)


def _find_similar(key: str, valid_keys: set[str], threshold: float = 0.6) -> str | None:
    """Closest valid key to a misspelled one, if any is similar enough."""
    matches = difflib.get_close_matches(key, sorted(valid_keys), n=1, cutoff=threshold)
    return matches[0] if matches else None


def _warn_unknown_keys(
    data: dict, valid_keys: set[str], section: str, config_path: Path | None = None
) -> None:
    """Warn about unknown keys in a config section."""
    unknown_keys = set(data.keys()) - valid_keys
    if not unknown_keys:
        return

    from .logging import warning

    location = f" in {config_path}" if config_path else ""
    for key in sorted(unknown_keys):
        msg = f"Unknown config key '{key}' in [{section}]{location}"

        similar = _find_similar(key, valid_keys)
        if similar:
            msg += f". Did you mean '{similar}'?"

        warning(msg)


def _load_dataclass(
    cls: type[T],
    data: dict,
    defaults: T,
    transforms: dict[str, callable] | None = None,
    section: str = "",
    config_path: Path | None = None,
) -> T:
    """Load a dataclass from a dict with defaults and optional field transforms.

    Args:
        cls: The dataclass type to create
        data: Dict of values from config file
        defaults: Instance with default values
        transforms: Optional dict mapping field names to transform functions
        section: Section name for validation warnings
        config_path: Path to config file for validation warnings

    Returns:
        New instance of cls with values from data, falling back to defaults
    """
    transforms = transforms or {}
    kwargs = {}
    valid_keys = {f.name for f in fields(cls)}

    _warn_unknown_keys(data, valid_keys, section, config_path)

    for f in fields(cls):
        value = data.get(f.name, getattr(defaults, f.name))
        if f.name in transforms:
            value = transforms[f.name](value)
        kwargs[f.name] = value
    return cls(**kwargs)


@dataclass(frozen=True)
class ScaleConfig:
    """Options of the natural-size transform, fixed for its lifetime."""

    prescale: float = 1
    allow_abbreviation: bool = False
    data_url_dialect: str = DIALECT_GENERAL

    def __post_init__(self):
        if self.data_url_dialect not in DATA_URL_DIALECTS:
            raise ValueError(
                f"Unknown data_url_dialect '{self.data_url_dialect}' "
                f"(expected one of: {', '.join(DATA_URL_DIALECTS)})"
            )


@dataclass
class SiteConfig:
    """Site-level configuration."""

    name: str = "My Documents"
    language: str = "en"


@dataclass
class BuildConfig:
    """Build-related configuration."""

    ignored_folders: list[str] = field(default_factory=lambda: ["_private"])
    standalone: bool = True  # wrap rendered pages in page.html


@dataclass
class Config:
    """Main configuration container."""

    site: SiteConfig = field(default_factory=SiteConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    scale: ScaleConfig = field(default_factory=ScaleConfig)

    # Computed paths (set after loading)
    project_path: Path | None = None
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path) -> "Config":
        """Load configuration from a TOML file.

        Args:
            config_path: Path to the config.toml file

        Returns:
            Loaded Config object with defaults merged

        Raises:
            ValueError: If [scale] names an unknown data_url_dialect
        """
        config = cls()
        config.config_path = config_path
        config.project_path = config_path.parent.parent  # .natsize/config.toml -> project

        if not config_path.exists():
            return config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        _warn_unknown_keys(data, {"site", "build", "scale"}, "top-level", config_path)

        if "site" in data:
            config.site = _load_dataclass(
                SiteConfig,
                data["site"],
                config.site,
                section="site",
                config_path=config_path,
            )

        if "build" in data:
            config.build = _load_dataclass(
                BuildConfig,
                data["build"],
                config.build,
                section="build",
                config_path=config_path,
            )

        if "scale" in data:
            config.scale = _load_dataclass(
                ScaleConfig,
                data["scale"],
                config.scale,
                transforms={"prescale": float},
                section="scale",
                config_path=config_path,
            )

        return config

    @classmethod
    def find_and_load(cls, start_path: Path | None = None) -> "Config":
        """Find and load config from .natsize/config.toml.

        Searches from start_path up to filesystem root for .natsize/config.toml.

        Raises:
            FileNotFoundError: If no .natsize/config.toml is found
        """
        if start_path is None:
            start_path = Path.cwd()

        config_path = cls.find_config(start_path)
        if config_path is None:
            raise FileNotFoundError(
                "No .natsize/config.toml found. Run 'natsize init' first."
            )

        return cls.load(config_path)

    @staticmethod
    def find_config(start_path: Path) -> Path | None:
        """Find .natsize/config.toml starting from start_path."""
        current = start_path.resolve()

        while True:
            config_path = current / CONFIG_DIR / CONFIG_FILE
            if config_path.exists():
                return config_path

            parent = current.parent
            if parent == current:
                return None
            current = parent

    def get_build_dir(self) -> Path:
        """Get the build output directory."""
        base = self.project_path or Path.cwd()
        return base / CONFIG_DIR / "build"

    def get_templates_dir(self) -> Path | None:
        """Get custom templates directory if it exists."""
        if self.project_path:
            templates_dir = self.project_path / CONFIG_DIR / "templates"
            if templates_dir.exists():
                return templates_dir
        return None

    def to_template_context(self) -> dict:
        """Convert config to a dict suitable for Jinja2 templates."""
        return {
            "site_name": self.site.name,
            "language": self.site.language,
        }
