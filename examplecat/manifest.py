"""Manifest loading and typed conversion of the example tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import MalformedManifestError
from .logging import get_logger
from .models import CategoryDescription, ExampleDeclaration, ExampleMetadata

DOC_SCRAPE_KEY = "doc-scrape-examples"

_logger = get_logger("manifest")


@dataclass
class Manifest:
    """Typed view of the example-related tables of a project manifest."""

    declarations: List[ExampleDeclaration] = field(default_factory=list)
    metadata: Dict[str, ExampleMetadata] = field(default_factory=dict)
    categories: List[CategoryDescription] = field(default_factory=list)

    def category_lookup(self) -> Dict[str, str]:
        return build_category_lookup(self.categories)


def load_manifest(path: Path) -> Manifest:
    """Read and parse the manifest at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedManifestError(f"Failed to read manifest {path}: {exc}") from exc
    _logger.debug("Loaded manifest %s (%d bytes)", path, len(text))
    return parse_manifest(text, source=str(path))


def parse_manifest(text: str, *, source: str = "<manifest>") -> Manifest:
    """Parse manifest text into declarations, metadata and categories."""
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise MalformedManifestError(f"Failed to parse {source}: {exc}") from exc

    manifest = Manifest(
        declarations=parse_declarations(document),
        metadata=parse_metadata(document),
        categories=parse_categories(document),
    )
    _logger.debug(
        "Manifest %s declares %d examples, %d metadata entries, %d categories",
        source,
        len(manifest.declarations),
        len(manifest.metadata),
        len(manifest.categories),
    )
    return manifest


def parse_declarations(document: Mapping[str, Any]) -> List[ExampleDeclaration]:
    """Convert the ``[[example]]`` array of tables into declarations."""
    entries = _array_of_tables(document.get("example"), "example")
    declarations: List[ExampleDeclaration] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        where = f"example[{index}]"
        technical_name = _require_str(entry, "name", where)
        where = f"example {technical_name}"
        if technical_name in seen:
            raise MalformedManifestError(
                f"Example {technical_name} is declared more than once", example=technical_name
            )
        seen.add(technical_name)
        declarations.append(
            ExampleDeclaration(
                technical_name=technical_name,
                path=_require_str(entry, "path", where, example=technical_name),
                doc_scrape=DOC_SCRAPE_KEY in entry,
            )
        )
    return declarations


def parse_metadata(document: Mapping[str, Any]) -> Dict[str, ExampleMetadata]:
    """Convert ``[package.metadata.example.<name>]`` tables into metadata records."""
    table = _metadata_table(document).get("example")
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise MalformedManifestError("package.metadata.example must be a table")

    metadata: Dict[str, ExampleMetadata] = {}
    for technical_name, entry in table.items():
        where = f"package.metadata.example.{technical_name}"
        if not isinstance(entry, dict):
            raise MalformedManifestError(f"{where} must be a table", example=technical_name)
        metadata[technical_name] = ExampleMetadata(
            name=_require_str(entry, "name", where, example=technical_name),
            description=_require_str(entry, "description", where, example=technical_name),
            category=_require_str(entry, "category", where, example=technical_name),
            wasm=_require_bool(entry, "wasm", where, example=technical_name),
            hidden=_optional_bool(entry, "hidden", where, example=technical_name) or False,
        )
    return metadata


def parse_categories(document: Mapping[str, Any]) -> List[CategoryDescription]:
    """Convert ``[[package.metadata.example_category]]`` into category descriptions."""
    entries = _array_of_tables(
        _metadata_table(document).get("example_category"), "package.metadata.example_category"
    )
    categories: List[CategoryDescription] = []
    for index, entry in enumerate(entries):
        where = f"package.metadata.example_category[{index}]"
        categories.append(
            CategoryDescription(
                name=_require_str(entry, "name", where),
                description=_require_str(entry, "description", where),
            )
        )
    return categories


def build_category_lookup(entries: Sequence[CategoryDescription]) -> Dict[str, str]:
    """Map category names to descriptions; a repeated name keeps the last entry."""
    lookup: Dict[str, str] = {}
    for entry in entries:
        if entry.name in lookup:
            _logger.warning("Category %s is described more than once; using the last entry", entry.name)
        lookup[entry.name] = entry.description
    return lookup


def _metadata_table(document: Mapping[str, Any]) -> Mapping[str, Any]:
    package = document.get("package")
    if package is None:
        return {}
    if not isinstance(package, dict):
        raise MalformedManifestError("package must be a table")
    metadata = package.get("metadata")
    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise MalformedManifestError("package.metadata must be a table")
    return metadata


def _array_of_tables(value: Any, where: str) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise MalformedManifestError(f"{where} must be an array of tables")
    return value


def _require_str(
    entry: Mapping[str, Any], key: str, where: str, *, example: Optional[str] = None
) -> str:
    if key not in entry:
        raise MalformedManifestError(f"{where} is missing required key '{key}'", example=example)
    value = entry[key]
    if not isinstance(value, str):
        raise MalformedManifestError(
            f"{where}: '{key}' must be a string, got {type(value).__name__}", example=example
        )
    return value


def _require_bool(
    entry: Mapping[str, Any], key: str, where: str, *, example: Optional[str] = None
) -> bool:
    if key not in entry:
        raise MalformedManifestError(f"{where} is missing required key '{key}'", example=example)
    return _check_bool(entry[key], key, where, example)


def _optional_bool(
    entry: Mapping[str, Any], key: str, where: str, *, example: Optional[str] = None
) -> Optional[bool]:
    if key not in entry:
        return None
    return _check_bool(entry[key], key, where, example)


def _check_bool(value: Any, key: str, where: str, example: Optional[str]) -> bool:
    if not isinstance(value, bool):
        raise MalformedManifestError(
            f"{where}: '{key}' must be a boolean, got {type(value).__name__}", example=example
        )
    return value


__all__ = [
    "DOC_SCRAPE_KEY",
    "Manifest",
    "build_category_lookup",
    "load_manifest",
    "parse_categories",
    "parse_declarations",
    "parse_manifest",
    "parse_metadata",
]
