"""Groups examples by category and orders them for rendering."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping

from .models import Catalog, Category, Example


def group_by_category(examples: Iterable[Example]) -> Dict[str, List[Example]]:
    grouped: Dict[str, List[Example]] = defaultdict(list)
    for example in examples:
        grouped[example.category].append(example)
    return dict(grouped)


def aggregate(examples: Iterable[Example], categories: Mapping[str, str]) -> Catalog:
    """Build the category catalog.

    Examples inside a category are sorted by ``(category, name)``. Categories
    without an entry in ``categories`` get a ``None`` description. Keys are
    returned in ascending order so output does not depend on declaration order.
    """
    grouped = group_by_category(examples)
    catalog: Catalog = {}
    for name in sorted(grouped):
        catalog[name] = Category(
            description=categories.get(name),
            examples=sorted(grouped[name], key=Example.sort_key),
        )
    return catalog


__all__ = ["aggregate", "group_by_category"]
