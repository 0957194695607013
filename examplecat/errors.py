"""Error types raised while validating and rendering the example catalog."""

from __future__ import annotations

from typing import Optional

MALFORMED_MANIFEST = "malformed-manifest"
MISSING_METADATA = "missing-metadata"
MISSING_DOC_SCRAPE = "missing-doc-scrape"
RENDER_FAILURE = "render-failure"


class CatalogError(RuntimeError):
    """Base error carrying a machine-readable kind and the offending example."""

    kind = "catalog-error"

    def __init__(self, message: str, *, example: Optional[str] = None) -> None:
        super().__init__(message)
        self.example = example


class MalformedManifestError(CatalogError):
    """Raised when the manifest cannot be parsed or a required key is wrong."""

    kind = MALFORMED_MANIFEST


class MissingMetadataError(CatalogError):
    """Raised in strict mode when a declared example has no metadata entry."""

    kind = MISSING_METADATA

    def __init__(self, example: str) -> None:
        super().__init__(f"Missing metadata for example {example}", example=example)


class MissingDocScrapeError(CatalogError):
    """Raised in strict mode when a declared example lacks the doc-scrape marker."""

    kind = MISSING_DOC_SCRAPE

    def __init__(self, example: str) -> None:
        super().__init__(f"Example {example} is missing doc-scrape-examples", example=example)


class RenderError(CatalogError):
    kind = RENDER_FAILURE


__all__ = [
    "CatalogError",
    "MALFORMED_MANIFEST",
    "MISSING_DOC_SCRAPE",
    "MISSING_METADATA",
    "MalformedManifestError",
    "MissingDocScrapeError",
    "MissingMetadataError",
    "RENDER_FAILURE",
    "RenderError",
]
