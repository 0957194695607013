"""Renders the example catalog through a Jinja2 template."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import asdict
import os
from pathlib import Path
import tempfile
from typing import Dict, Iterator, List, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .errors import RenderError
from .logging import get_logger
from .models import Catalog

DEFAULT_TEMPLATE = "EXAMPLE_README.md.tpl"
BUNDLED_TEMPLATES = Path(__file__).with_name("templates")


class CatalogRenderer:
    """Feeds the catalog into a named template and writes the result."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.templates_dir = templates_dir
        self.template_name = template_name
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("renderer")

    def render(self, catalog: Catalog) -> str:
        """Render ``catalog`` and return the document text."""
        context = {"all_examples": catalog_context(catalog)}
        try:
            template = self._env.get_template(self.template_name)
            return template.render(context)
        except (TemplateError, TypeError, ValueError) as exc:
            raise RenderError(f"Failed to render template {self.template_name}: {exc}") from exc

    def write(self, catalog: Catalog, destination: Path) -> Path:
        """Render ``catalog`` and replace ``destination`` with the output.

        The document is rendered before the destination is touched and then
        moved into place, so a failed run leaves any previous file intact.
        """
        content = self.render(catalog)
        try:
            with _atomic_destination(destination) as handle:
                handle.write(content)
        except OSError as exc:
            raise RenderError(f"Failed to write {destination}: {exc}") from exc
        self.logger.info("Wrote %s", destination)
        return destination

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(BUNDLED_TEMPLATES))
        return Environment(
            loader=FileSystemLoader(directories),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )


def catalog_context(catalog: Catalog) -> Dict[str, Dict[str, object]]:
    """Convert the catalog into the plain mapping templates receive."""
    return {
        name: {
            "description": category.description,
            "examples": [asdict(example) for example in category.examples],
        }
        for name, category in catalog.items()
    }


@contextmanager
def _atomic_destination(destination: Path) -> Iterator[TextIO]:
    destination.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            yield handle
        # mkstemp creates 0600 files; keep the permissions a plain write would give.
        mode = destination.stat().st_mode & 0o777 if destination.exists() else 0o644
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, destination)
    finally:
        tmp_path.unlink(missing_ok=True)


__all__ = ["BUNDLED_TEMPLATES", "CatalogRenderer", "DEFAULT_TEMPLATE", "catalog_context"]
