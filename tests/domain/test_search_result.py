"""Tests for SearchResult."""

from __future__ import annotations

from typing import Any

import pytest

from catalog_admin.domain.category import Category
from catalog_admin.domain.search import SearchResult


def test_to_dict_echoes_pagination() -> None:
    result: SearchResult[Any] = SearchResult(
        items=["entity1", "entity2"],
        total=4,
        current_page=1,
        per_page=2,
    )

    assert result.to_dict() == {
        "items": ["entity1", "entity2"],
        "total": 4,
        "current_page": 1,
        "per_page": 2,
        "last_page": 2,
    }


@pytest.mark.parametrize(
    ("total", "per_page", "expected"),
    [
        (4, 15, 1),  # per_page greater than total
        (15, 15, 1),
        (16, 15, 2),
        (101, 20, 6),
        (0, 15, 1),
    ],
)
def test_last_page(total: int, per_page: int, expected: int) -> None:
    result: SearchResult[Any] = SearchResult(items=[], total=total, current_page=1, per_page=per_page)

    assert result.last_page == expected


def test_to_dict_can_serialize_entities() -> None:
    category = Category(name="Movie")
    result = SearchResult(items=[category], total=1, current_page=1, per_page=15)

    assert result.to_dict()["items"] == [category]
    assert result.to_dict(force_entity=True)["items"] == [category.to_dict()]


def test_is_immutable() -> None:
    result: SearchResult[Any] = SearchResult(items=[], total=0, current_page=1, per_page=15)

    with pytest.raises(AttributeError):
        result.total = 10  # type: ignore[misc]


def test_items_are_copied() -> None:
    items: list[Any] = ["a"]
    result: SearchResult[Any] = SearchResult(items=items, total=1, current_page=1, per_page=15)

    items.append("b")

    assert result.items == ["a"]
