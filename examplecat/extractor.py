"""Builds validated example records from manifest declarations and metadata."""

from __future__ import annotations

from typing import List

from .errors import MissingDocScrapeError, MissingMetadataError
from .logging import get_logger
from .manifest import Manifest
from .models import Example

_logger = get_logger("extractor")


def extract_examples(manifest: Manifest, strict: bool = False) -> List[Example]:
    """Return one `Example` per declared, documented and visible example.

    Records keep the manifest's declaration order. With ``strict`` enabled,
    every declaration must have a metadata entry and the doc-scrape marker;
    these checks run before hidden examples are dropped, so hidden examples
    are validated too. Without ``strict``, undocumented declarations are
    skipped.
    """
    examples: List[Example] = []
    for declaration in manifest.declarations:
        technical_name = declaration.technical_name
        metadata = manifest.metadata.get(technical_name)

        if strict:
            if metadata is None:
                raise MissingMetadataError(technical_name)
            if not declaration.doc_scrape:
                raise MissingDocScrapeError(technical_name)

        if metadata is None:
            _logger.debug("Skipping %s: no metadata", technical_name)
            continue
        if metadata.hidden:
            _logger.debug("Skipping %s: hidden", technical_name)
            continue

        examples.append(
            Example(
                technical_name=technical_name,
                path=declaration.path,
                name=metadata.name,
                description=metadata.description,
                category=metadata.category,
                wasm=metadata.wasm,
            )
        )

    _logger.debug(
        "Extracted %d of %d declared examples (strict=%s)",
        len(examples),
        len(manifest.declarations),
        strict,
    )
    return examples


__all__ = ["extract_examples"]
