"""Tests for examplecat.aggregator."""

from __future__ import annotations

import itertools

from examplecat.aggregator import aggregate, group_by_category
from examplecat.models import Category, Example


def _example(technical_name: str, name: str, category: str = "basic", *, wasm: bool = False) -> Example:
    return Example(
        technical_name=technical_name,
        path=f"examples/{technical_name}.rs",
        name=name,
        description=f"{name} example.",
        category=category,
        wasm=wasm,
    )


def test_examples_are_sorted_by_name_within_category() -> None:
    zeta = _example("zeta", "Zeta")
    alpha = _example("alpha", "Alpha")

    catalog = aggregate([zeta, alpha], {})

    assert [example.name for example in catalog["basic"].examples] == ["Alpha", "Zeta"]


def test_sort_uses_code_point_order() -> None:
    examples = [_example("b", "beta"), _example("a", "Alpha"), _example("c", "Ćwierć")]

    catalog = aggregate(examples, {})

    assert [example.name for example in catalog["basic"].examples] == ["Alpha", "beta", "Ćwierć"]


def test_grouping_is_independent_of_input_order() -> None:
    examples = [
        _example("ex1", "First", "basic"),
        _example("ex2", "Second", "2d"),
        _example("ex3", "Third", "basic"),
        _example("ex4", "Fourth", "audio"),
    ]
    expected = aggregate(examples, {"basic": "Basic examples."})

    for permutation in itertools.permutations(examples):
        assert aggregate(list(permutation), {"basic": "Basic examples."}) == expected


def test_catalog_keys_are_sorted() -> None:
    examples = [_example("ex1", "First", "ui"), _example("ex2", "Second", "2d"), _example("ex3", "Third", "audio")]

    assert list(aggregate(examples, {})) == ["2d", "audio", "ui"]


def test_descriptions_attach_and_missing_ones_are_none() -> None:
    examples = [_example("ex1", "First", "basic"), _example("ex2", "Second", "uncategorised")]

    catalog = aggregate(examples, {"basic": "Basic examples.", "unused": "Never referenced."})

    assert catalog["basic"].description == "Basic examples."
    assert catalog["uncategorised"].description is None
    assert "unused" not in catalog


def test_empty_input_gives_empty_catalog() -> None:
    assert aggregate([], {"basic": "Basic examples."}) == {}


def test_group_by_category_preserves_arrival_order() -> None:
    first = _example("ex1", "Zeta")
    second = _example("ex2", "Alpha")

    assert group_by_category([first, second]) == {"basic": [first, second]}


def test_aggregate_returns_category_records() -> None:
    example = _example("ex1", "First")

    assert aggregate([example], {"basic": "Basic examples."}) == {
        "basic": Category(description="Basic examples.", examples=[example])
    }
