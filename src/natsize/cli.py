"""Command-line interface for natsize."""

import dataclasses
import importlib.resources
from pathlib import Path

import click

from .config import CONFIG_DIR, CONFIG_FILE, DATA_URL_DIALECTS, Config, ScaleConfig


def get_default_config_content() -> str:
    """Get the default config.toml content from bundled defaults."""
    resource = importlib.resources.files("natsize.defaults").joinpath(CONFIG_FILE)
    if resource.is_file():
        return resource.read_text(encoding="utf-8")
    # Fallback to inline default
    return """\
[site]
name = "My Documents"

[scale]
prescale = 1.0
allow_abbreviation = false
"""


def _load_config() -> Config:
    """Project config if one is found, otherwise defaults rooted at cwd."""
    try:
        return Config.find_and_load()
    except FileNotFoundError:
        return Config.load(Path.cwd() / CONFIG_DIR / CONFIG_FILE)


def _scale_overrides(
    base: ScaleConfig,
    prescale: float | None,
    allow_abbreviation: bool | None,
    dialect: str | None,
) -> ScaleConfig:
    """Apply command-line overrides on top of the [scale] section."""
    overrides = {}
    if prescale is not None:
        overrides["prescale"] = prescale
    if allow_abbreviation is not None:
        overrides["allow_abbreviation"] = allow_abbreviation
    if dialect is not None:
        overrides["data_url_dialect"] = dialect
    return dataclasses.replace(base, **overrides)


def scale_options(func):
    """Options shared by commands that run the transform."""
    func = click.option(
        "--dialect",
        type=click.Choice(DATA_URL_DIALECTS),
        default=None,
        help="How data: URLs are handled",
    )(func)
    func = click.option(
        "--allow-abbreviation/--no-allow-abbreviation",
        default=None,
        help="Accept data-nscale as an alias",
    )(func)
    func = click.option(
        "--prescale", type=float, default=None, help="Global scale multiplier"
    )(func)
    return func


def _exit_with_error(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="natsize")
def main():
    """natsize - scale document images to their natural size."""
    pass


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing files")
def init(force: bool):
    """Initialize a new natsize project."""
    from .templates import copy_default_templates

    natsize_dir = Path.cwd() / CONFIG_DIR
    config_file = natsize_dir / CONFIG_FILE
    templates_dir = natsize_dir / "templates"

    if config_file.exists() and not force:
        click.echo(f"Error: {CONFIG_DIR}/{CONFIG_FILE} already exists", err=True)
        click.echo("Use --force to overwrite", err=True)
        raise SystemExit(1)

    natsize_dir.mkdir(exist_ok=True)
    config_file.write_text(get_default_config_content(), encoding="utf-8")
    click.echo(f"Created {config_file}")

    templates_created = copy_default_templates(templates_dir, force=force)
    if templates_created:
        click.echo(f"Created {templates_dir}/ ({len(templates_created)} templates)")

    click.echo("\nRun 'natsize build' to render your documents")


@main.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def build(verbose: bool):
    """Render all markdown documents of the project."""
    from .build import build as do_build
    from .logging import setup_logging

    setup_logging(verbose=verbose)

    try:
        config = Config.find_and_load()
    except (FileNotFoundError, ValueError) as e:
        _exit_with_error(str(e))

    if do_build(config) == 0:
        _exit_with_error("No markdown documents found to build")


@main.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write HTML here instead of stdout",
)
@click.option(
    "--standalone/--fragment",
    default=None,
    help="Wrap the output in the page template",
)
@scale_options
def render(
    source: Path,
    output: Path | None,
    standalone: bool | None,
    prescale: float | None,
    allow_abbreviation: bool | None,
    dialect: str | None,
):
    """Render one markdown file to HTML."""
    from .build import render_document

    try:
        config = _load_config()
    except ValueError as e:
        _exit_with_error(str(e))
    config.scale = _scale_overrides(config.scale, prescale, allow_abbreviation, dialect)

    html = render_document(source, config, standalone=standalone)

    if output is None:
        click.echo(html)
    else:
        output.write_text(html, encoding="utf-8")
        click.echo(f"Wrote {output}")


@main.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--source",
    type=click.Path(path_type=Path),
    default=None,
    help="Resolve images relative to this file instead of each HTML file",
)
@scale_options
def process(
    files: tuple[Path, ...],
    source: Path | None,
    prescale: float | None,
    allow_abbreviation: bool | None,
    dialect: str | None,
):
    """Scale images of existing HTML files in place."""
    from .postprocess import process_html_file

    try:
        config = _load_config()
    except ValueError as e:
        _exit_with_error(str(e))
    scale = _scale_overrides(config.scale, prescale, allow_abbreviation, dialect)

    modified = 0
    for html_file in files:
        if process_html_file(html_file, scale, source):
            modified += 1

    click.echo(f"Processed {len(files)} files, {modified} modified")


@main.command()
def clean():
    """Remove build artifacts."""
    from .assets import robust_rmtree

    build_dir = Path.cwd() / CONFIG_DIR / "build"

    if build_dir.exists():
        robust_rmtree(build_dir)
        click.echo(f"Removed {build_dir}")
    else:
        click.echo("Nothing to clean")


if __name__ == "__main__":
    main()
