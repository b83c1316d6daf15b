"""Render a tree of markdown documents to HTML with natural-size images."""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from jinja2 import Environment

from .assets import copy_image_assets, is_path_ignored
from .config import Config
from .markdown_utils import extract_title, parse_markdown_file, render_markdown
from .templates import get_environment, render_page


def iter_markdown_files(project_path: Path, ignored_folders: list[str]) -> Iterator[Path]:
    """Yield markdown files under project_path, skipping ignored folders."""
    for md_file in sorted(project_path.glob("**/*.md")):
        if is_path_ignored(md_file, project_path, ignored_folders):
            continue
        yield md_file


def render_document(
    md_file: Path,
    config: Config,
    env: Environment | None = None,
    standalone: bool | None = None,
) -> str:
    """Render one markdown file to HTML.

    Args:
        md_file: Markdown source; relative images resolve against its directory
        config: Project configuration
        env: Jinja2 environment (created on demand for standalone output)
        standalone: Wrap in page.html (default from config)

    Returns:
        HTML string
    """
    if standalone is None:
        standalone = config.build.standalone

    meta, markdown_content = parse_markdown_file(md_file)
    html = render_markdown(markdown_content, md_file, config.scale)

    if not standalone:
        return html

    if env is None:
        env = get_environment(config.get_templates_dir())
    title = extract_title(meta, markdown_content, md_file.stem)
    return render_page(env, title, html, config.to_template_context())


def build(config: Config) -> int:
    """Build HTML pages for every markdown file in the project.

    Args:
        config: Configuration object

    Returns:
        Number of pages written
    """
    from .logging import debug, error, info

    project_path = config.project_path
    if not project_path or not project_path.exists():
        error(f"Project directory '{project_path}' does not exist")
        return 0

    build_dir = config.get_build_dir()
    build_dir.mkdir(parents=True, exist_ok=True)
    env = get_environment(config.get_templates_dir())

    timestamp = datetime.now().strftime("%H:%M:%S")
    info(f"[{timestamp}] Building...")

    pages = 0
    for md_file in iter_markdown_files(project_path, config.build.ignored_folders):
        rel_path = md_file.relative_to(project_path)
        output_file = build_dir / rel_path.with_suffix(".html")
        debug(f"  Building: {rel_path.as_posix()}")

        try:
            html = render_document(md_file, config, env)
        except Exception as e:
            error(f"Rendering {md_file}: {e}")
            continue

        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html, encoding="utf-8")
        pages += 1

    copied = copy_image_assets(project_path, build_dir, config.build.ignored_folders)

    debug(f"  - {copied} images copied")
    debug(f"  - Output directory: {build_dir.absolute()}")
    info(f"Done: {pages} pages")
    return pages
