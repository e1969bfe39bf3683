"""
Test suite for InMemorySearchableRepository.

Test sections:
- Filter: predicate is only consulted when a filter is present
- Sort: allow-list, default sort hook, stability for equal keys
- Pagination: slicing and out-of-range pages
- Search: filter → sort → paginate orchestration and total counting
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from unittest.mock import Mock

import pytest

from catalog_admin.adapters.in_memory_repository import InMemorySearchableRepository
from catalog_admin.domain.entity import Entity
from catalog_admin.domain.search import SearchParams, SearchResult, SortDirection
from catalog_admin.domain.value_objects import Uuid


@dataclass
class StubEntity(Entity):
    name: str
    price: int
    stub_id: Uuid = field(default_factory=Uuid)

    @property
    def entity_id(self) -> Uuid:
        return self.stub_id

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.stub_id.id, "name": self.name, "price": self.price}


def name_or_price_matches(entity: StubEntity, filter: str) -> bool:
    return filter.lower() in entity.name.lower() or str(entity.price) == filter


class StubSearchableRepository(InMemorySearchableRepository[StubEntity, Uuid]):
    sortable_fields = ("name",)

    def __init__(self, items: list[StubEntity] | None = None, filter_predicate: Any = None) -> None:
        super().__init__(items, filter_predicate=filter_predicate or name_or_price_matches)

    def get_entity(self) -> type[StubEntity]:
        return StubEntity


class DefaultSortedStubRepository(StubSearchableRepository):
    default_sort = ("price", SortDirection.DESC)


@pytest.fixture()
def repo() -> StubSearchableRepository:
    return StubSearchableRepository()


# ==============================================================================
# Filter
# ==============================================================================


def test_apply_filter_skips_predicate_when_filter_is_none() -> None:
    predicate = Mock(return_value=False)
    repo = StubSearchableRepository(filter_predicate=predicate)
    items = [StubEntity(name="name value", price=5)]

    filtered = repo.apply_filter(items, None)

    assert filtered == items
    predicate.assert_not_called()


async def test_search_without_filter_never_calls_predicate() -> None:
    predicate = Mock(return_value=False)
    items = [StubEntity(name="a", price=1), StubEntity(name="b", price=2)]
    repo = StubSearchableRepository(items, filter_predicate=predicate)

    result = await repo.search(SearchParams())

    predicate.assert_not_called()
    assert result.items == items
    assert result.total == 2


def test_apply_filter_uses_predicate(repo: StubSearchableRepository) -> None:
    items = [
        StubEntity(name="test", price=5),
        StubEntity(name="TEST", price=5),
        StubEntity(name="fake", price=0),
    ]

    assert repo.apply_filter(items, "TEST") == [items[0], items[1]]
    assert repo.apply_filter(items, "5") == [items[0], items[1]]
    assert repo.apply_filter(items, "0") == [items[2]]
    assert repo.apply_filter(items, "wrong-filter") == []


def test_apply_filter_calls_predicate_once_per_item() -> None:
    predicate = Mock(return_value=True)
    repo = StubSearchableRepository(filter_predicate=predicate)
    items = [StubEntity(name="a", price=1), StubEntity(name="b", price=2)]

    repo.apply_filter(items, "x")

    assert predicate.call_count == 2


def test_matches_override_is_used_without_injected_predicate() -> None:
    class NameOnlyRepository(InMemorySearchableRepository[StubEntity, Uuid]):
        def matches(self, entity: StubEntity, filter: str) -> bool:
            return entity.name == filter

        def get_entity(self) -> type[StubEntity]:
            return StubEntity

    repo = NameOnlyRepository()
    items = [StubEntity(name="a", price=1), StubEntity(name="b", price=2)]

    assert repo.apply_filter(items, "b") == [items[1]]


def test_missing_predicate_raises_only_when_filtering() -> None:
    class NoPredicateRepository(InMemorySearchableRepository[StubEntity, Uuid]):
        def get_entity(self) -> type[StubEntity]:
            return StubEntity

    repo = NoPredicateRepository()
    items = [StubEntity(name="a", price=1)]

    assert repo.apply_filter(items, None) == items
    with pytest.raises(NotImplementedError):
        repo.apply_filter(items, "a")


# ==============================================================================
# Sort
# ==============================================================================


def test_apply_sort_returns_items_unmodified_without_usable_sort(
    repo: StubSearchableRepository,
) -> None:
    items = [StubEntity(name="b", price=5), StubEntity(name="a", price=0)]

    assert repo.apply_sort(items, None, None) == items
    # price is not in sortable_fields
    assert repo.apply_sort(items, "price", SortDirection.ASC) == items


def test_apply_sort_orders_by_field(repo: StubSearchableRepository) -> None:
    items = [
        StubEntity(name="b", price=5),
        StubEntity(name="a", price=5),
        StubEntity(name="c", price=0),
    ]

    assert repo.apply_sort(items, "name", SortDirection.ASC) == [items[1], items[0], items[2]]
    assert repo.apply_sort(items, "name", SortDirection.DESC) == [items[2], items[0], items[1]]


def test_apply_sort_does_not_touch_input(repo: StubSearchableRepository) -> None:
    items = [StubEntity(name="b", price=5), StubEntity(name="a", price=5)]
    original = list(items)

    sorted_items = repo.apply_sort(items, "name", SortDirection.ASC)

    assert items == original
    assert sorted_items is not items


@pytest.mark.parametrize("sort_dir", [SortDirection.ASC, SortDirection.DESC])
def test_apply_sort_is_stable_for_equal_keys(
    repo: StubSearchableRepository, sort_dir: SortDirection
) -> None:
    items = [
        StubEntity(name="same", price=1),
        StubEntity(name="same", price=2),
        StubEntity(name="same", price=3),
    ]

    assert repo.apply_sort(items, "name", sort_dir) == items


def test_apply_sort_desc_keeps_ties_in_filtered_order(repo: StubSearchableRepository) -> None:
    items = [
        StubEntity(name="a", price=1),
        StubEntity(name="b", price=2),
        StubEntity(name="a", price=3),
        StubEntity(name="b", price=4),
    ]

    sorted_items = repo.apply_sort(items, "name", SortDirection.DESC)

    assert [item.price for item in sorted_items] == [2, 4, 1, 3]


def test_default_sort_applies_when_sort_is_unusable() -> None:
    repo = DefaultSortedStubRepository()
    items = [
        StubEntity(name="a", price=1),
        StubEntity(name="b", price=3),
        StubEntity(name="c", price=2),
    ]

    assert repo.apply_sort(items, None, None) == [items[1], items[2], items[0]]
    assert repo.apply_sort(items, "unknown", SortDirection.ASC) == [items[1], items[2], items[0]]
    # An explicit valid sort wins over the default
    assert repo.apply_sort(items, "name", SortDirection.DESC) == [items[2], items[1], items[0]]


def test_sort_value_hook_customizes_extraction() -> None:
    class LengthSortedRepository(StubSearchableRepository):
        def sort_value(self, entity: StubEntity, field: str) -> Any:
            return len(getattr(entity, field))

    repo = LengthSortedRepository()
    items = [StubEntity(name="ccc", price=1), StubEntity(name="a", price=2)]

    assert repo.apply_sort(items, "name", SortDirection.ASC) == [items[1], items[0]]


# ==============================================================================
# Pagination
# ==============================================================================


def test_apply_pagination(repo: StubSearchableRepository) -> None:
    items = [StubEntity(name=name, price=5) for name in "abcde"]

    assert repo.apply_pagination(items, 1, 2) == [items[0], items[1]]
    assert repo.apply_pagination(items, 2, 2) == [items[2], items[3]]
    assert repo.apply_pagination(items, 3, 2) == [items[4]]
    assert repo.apply_pagination(items, 4, 2) == []


# ==============================================================================
# Search
# ==============================================================================


async def test_search_applies_default_pagination_only() -> None:
    entity = StubEntity(name="a", price=5)
    repo = StubSearchableRepository([entity] * 16)

    result = await repo.search(SearchParams())

    assert result == SearchResult(items=[entity] * 15, total=16, current_page=1, per_page=15)
    assert result.last_page == 2


async def test_search_applies_filter_and_pagination() -> None:
    items = [
        StubEntity(name="test", price=5),
        StubEntity(name="a", price=5),
        StubEntity(name="TEST", price=5),
        StubEntity(name="TeST", price=5),
    ]
    repo = StubSearchableRepository(items)

    result = await repo.search(SearchParams(page=1, per_page=2, filter="TEST"))
    assert result == SearchResult(
        items=[items[0], items[2]], total=3, current_page=1, per_page=2
    )

    result = await repo.search(SearchParams(page=2, per_page=2, filter="TEST"))
    assert result == SearchResult(items=[items[3]], total=3, current_page=2, per_page=2)


@pytest.mark.parametrize(
    ("page", "expected_names"),
    [
        (1, ["a", "b"]),
        (2, ["c", "d"]),
        (3, ["e"]),
        (4, []),
    ],
)
async def test_search_applies_sort_and_pagination(page: int, expected_names: list[str]) -> None:
    items = [StubEntity(name=name, price=5) for name in "bacde"]
    repo = StubSearchableRepository(items)

    result = await repo.search(SearchParams(page=page, per_page=2, sort="name"))

    assert [item.name for item in result.items] == expected_names
    assert result.total == 5
    assert result.current_page == page
    assert result.last_page == 3


async def test_search_sorts_after_filtering() -> None:
    items = [
        StubEntity(name="x-c", price=1),
        StubEntity(name="y-a", price=2),
        StubEntity(name="x-a", price=3),
        StubEntity(name="x-b", price=4),
    ]
    repo = StubSearchableRepository(items)

    result = await repo.search(
        SearchParams(page=1, per_page=2, sort="name", sort_dir="desc", filter="x-")
    )

    assert [item.name for item in result.items] == ["x-c", "x-b"]
    assert result.total == 3


async def test_search_does_not_reorder_store() -> None:
    items = [StubEntity(name=name, price=5) for name in "cab"]
    repo = StubSearchableRepository(items)

    await repo.search(SearchParams(sort="name"))

    assert [item.name for item in await repo.find_all()] == ["c", "a", "b"]


async def test_search_out_of_range_page_returns_empty_items() -> None:
    repo = StubSearchableRepository([StubEntity(name=name, price=5) for name in "abcde"])

    result = await repo.search(SearchParams(page=4, per_page=2))

    assert result.items == []
    assert result.total == 5
