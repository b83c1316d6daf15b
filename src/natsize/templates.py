"""Template management for natsize."""

import importlib.resources
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, TemplateNotFound

TEMPLATES_PACKAGE = "natsize.defaults.templates"


class PackageLoader(BaseLoader):
    """Jinja2 loader that loads templates from a Python package."""

    def __init__(self, package: str):
        self.package = package

    def get_source(self, environment, template):
        try:
            pkg = importlib.resources.files(self.package)
            template_file = pkg.joinpath(template)
            if template_file.is_file():
                source = template_file.read_text(encoding="utf-8")
                return source, str(template_file), lambda: True
        except (TypeError, FileNotFoundError):
            pass
        raise TemplateNotFound(template)

    def list_templates(self):
        templates = []
        try:
            pkg = importlib.resources.files(self.package)
            for item in pkg.iterdir():
                if item.is_file() and item.name.endswith(".html"):
                    templates.append(item.name)
        except (TypeError, FileNotFoundError):
            pass
        return templates


def get_template_loader(templates_dir: Path | None = None) -> ChoiceLoader:
    """Get a Jinja2 template loader with override support.

    Template resolution order:
    1. User templates in .natsize/templates/
    2. Bundled default templates

    Args:
        templates_dir: User template directory, if any

    Returns:
        ChoiceLoader that checks user templates first, then bundled defaults
    """
    loaders = []

    if templates_dir and templates_dir.exists():
        loaders.append(FileSystemLoader(str(templates_dir)))

    loaders.append(PackageLoader(TEMPLATES_PACKAGE))

    return ChoiceLoader(loaders)


def get_environment(templates_dir: Path | None = None) -> Environment:
    """Jinja2 environment using get_template_loader()."""
    return Environment(loader=get_template_loader(templates_dir))


def render_page(env: Environment, title: str, content: str, context: dict) -> str:
    """Wrap rendered HTML content in page.html."""
    template = env.get_template("page.html")
    return template.render(title=title, content=content, **context)


def copy_default_templates(target_dir: Path, force: bool = False) -> list[Path]:
    """Copy the bundled templates into ``target_dir`` for customization.

    Existing files are kept unless ``force`` is set.

    Returns:
        Paths of the files written
    """
    loader = PackageLoader(TEMPLATES_PACKAGE)
    target_dir.mkdir(parents=True, exist_ok=True)

    created = []
    for name in loader.list_templates():
        target_file = target_dir / name
        if target_file.exists() and not force:
            continue
        source, _, _ = loader.get_source(None, name)
        target_file.write_text(source, encoding="utf-8")
        created.append(target_file)
    return created
