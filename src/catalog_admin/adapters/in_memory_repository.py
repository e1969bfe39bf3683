from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key
from typing import Any

from catalog_admin.domain.errors import NotFoundError
from catalog_admin.domain.search import SearchParams, SearchResult, SortDirection
from catalog_admin.ports.repository import E, EntityId, Repository, SearchableRepository

FilterPredicate = Callable[[Any, str], bool]


class InMemoryRepository(Repository[E, EntityId]):
    """
    Canonical contract implementation for tests.

    - Stores entities in insertion order in `items`
    - Matches identities by EntityId equality
    - Read operations never reorder or mutate the stored list

    No internal locking: share an instance across threads only with external
    synchronization. Mutations never await, so they are atomic with respect
    to other coroutines on the same event loop.
    """

    def __init__(self, items: Iterable[E] | None = None) -> None:
        self.items: list[E] = list(items) if items is not None else []

    async def insert(self, entity: E) -> None:
        self.items.append(entity)

    async def bulk_insert(self, entities: Sequence[E]) -> None:
        self.items.extend(entities)

    async def update(self, entity: E) -> None:
        index = self._index_of(entity.entity_id)
        if index is None:
            raise NotFoundError(entity.entity_id, self.get_entity())

        self.items[index] = entity

    async def delete(self, entity_id: EntityId) -> None:
        index = self._index_of(entity_id)
        if index is None:
            raise NotFoundError(entity_id, self.get_entity())

        del self.items[index]

    async def find_by_id(self, entity_id: EntityId) -> E | None:
        index = self._index_of(entity_id)
        return None if index is None else self.items[index]

    async def find_all(self) -> list[E]:
        return list(self.items)

    def _index_of(self, entity_id: Any) -> int | None:
        for index, item in enumerate(self.items):
            if item.entity_id == entity_id:
                return index
        return None


class InMemorySearchableRepository(InMemoryRepository[E, EntityId], SearchableRepository[E, EntityId]):
    """
    In-memory search engine: filter, then sort, then paginate.

    Extension points:
    - filter_predicate: strategy deciding whether an entity matches a filter
      string. Passed to __init__, or supplied by overriding matches(). It is
      only called when a filter is present.
    - sortable_fields: allow-list of attributes search may order by.
    - default_sort: (field, direction) used when the requested sort is None
      or not allowed. None keeps the filtered order.
    - sort_value(): how a field value is read from an entity.
    """

    sortable_fields: Sequence[str] = ()
    default_sort: tuple[str, SortDirection] | None = None

    def __init__(
        self,
        items: Iterable[E] | None = None,
        filter_predicate: FilterPredicate | None = None,
    ) -> None:
        super().__init__(items)
        self._filter_predicate = filter_predicate

    async def search(self, params: SearchParams) -> SearchResult[E]:
        filtered_items = self.apply_filter(self.items, params.filter)
        sorted_items = self.apply_sort(filtered_items, params.sort, params.sort_dir)
        paginated_items = self.apply_pagination(sorted_items, params.page, params.per_page)

        return SearchResult(
            items=paginated_items,
            total=len(filtered_items),  # Count BEFORE paging
            current_page=params.page,
            per_page=params.per_page,
        )

    def matches(self, entity: E, filter: str) -> bool:
        if self._filter_predicate is None:
            raise NotImplementedError(
                f"{type(self).__name__} needs a filter_predicate or a matches() override"
            )
        return self._filter_predicate(entity, filter)

    def apply_filter(self, items: list[E], filter: str | None) -> list[E]:
        if filter is None:
            return items

        return [item for item in items if self.matches(item, filter)]

    def apply_sort(
        self,
        items: list[E],
        sort: str | None,
        sort_dir: SortDirection | None,
    ) -> list[E]:
        if sort is None or sort not in self.sortable_fields:
            if self.default_sort is None:
                return items
            sort, sort_dir = self.default_sort

        ascending = sort_dir != SortDirection.DESC
        field = sort

        def compare(a: E, b: E) -> int:
            a_value = self.sort_value(a, field)
            b_value = self.sort_value(b, field)
            if a_value < b_value:
                return -1 if ascending else 1
            if a_value > b_value:
                return 1 if ascending else -1
            return 0

        # sorted() is stable, so equal keys keep their filtered order
        return sorted(items, key=cmp_to_key(compare))

    def sort_value(self, entity: E, field: str) -> Any:
        return getattr(entity, field)

    def apply_pagination(self, items: list[E], page: int, per_page: int) -> list[E]:
        start = (page - 1) * per_page
        end = start + per_page
        return items[start:end]
