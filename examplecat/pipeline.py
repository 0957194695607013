"""Pipeline orchestration for check and update runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .aggregator import aggregate
from .config import CatalogConfig
from .extractor import extract_examples
from .logging import get_logger
from .manifest import load_manifest
from .renderer import CatalogRenderer


@dataclass
class RunOutcome:
    """Result of a catalog run."""

    examples: int
    categories: int
    output: Optional[Path] = None
    rendered: Optional[str] = None


class CatalogPipeline:
    """Coordinates manifest loading, extraction, aggregation and rendering."""

    def __init__(self, config: CatalogConfig, renderer: CatalogRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or CatalogRenderer(
            config.templates_dir, template_name=config.template_name
        )
        self.logger = get_logger("pipeline")

    def run(
        self, *, check_missing: bool = False, update: bool = False, dry_run: bool = False
    ) -> RunOutcome:
        """Validate the manifest and, when requested, render the catalog.

        Extraction always runs, strictly when ``check_missing`` is set.
        ``update`` writes the rendered catalog to the configured output;
        ``dry_run`` renders it without writing.
        """
        self.logger.info("Reading examples from %s", self.config.manifest_path)
        manifest = load_manifest(self.config.manifest_path)
        examples = extract_examples(manifest, strict=check_missing)
        if check_missing:
            self.logger.info("All %d declared examples are documented", len(manifest.declarations))

        if not (update or dry_run):
            categories = {example.category for example in examples}
            return RunOutcome(examples=len(examples), categories=len(categories))

        catalog = aggregate(examples, manifest.category_lookup())
        self.logger.debug("Aggregated %d examples into %d categories", len(examples), len(catalog))
        outcome = RunOutcome(examples=len(examples), categories=len(catalog))
        if dry_run:
            outcome.rendered = self.renderer.render(catalog)
        else:
            outcome.output = self.renderer.write(catalog, self.config.output_path)
        return outcome


__all__ = ["CatalogPipeline", "RunOutcome"]
