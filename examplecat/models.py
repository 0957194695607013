"""Core data models shared across examplecat components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ExampleDeclaration:
    """An `[[example]]` entry from the manifest."""

    technical_name: str
    path: str
    doc_scrape: bool = False


@dataclass(frozen=True)
class ExampleMetadata:
    """Author-supplied documentation for one example."""

    name: str
    description: str
    category: str
    wasm: bool
    hidden: bool = False


@dataclass(frozen=True)
class CategoryDescription:
    name: str
    description: str


@dataclass(frozen=True)
class Example:
    """Validated example record merged from a declaration and its metadata."""

    technical_name: str
    path: str
    name: str
    description: str
    category: str
    wasm: bool

    def sort_key(self) -> Tuple[str, str]:
        return (self.category, self.name)


@dataclass
class Category:
    """Examples sharing a category, with the category's description if known."""

    description: Optional[str]
    examples: List[Example] = field(default_factory=list)


Catalog = Dict[str, Category]
