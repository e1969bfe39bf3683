from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from catalog_admin.domain.entity import Entity
from catalog_admin.domain.search import SearchParams, SearchResult
from catalog_admin.domain.value_objects import ValueObject

E = TypeVar("E", bound=Entity)
EntityId = TypeVar("EntityId", bound=ValueObject)


class Repository(ABC, Generic[E, EntityId]):
    """
    Port for entity persistence.

    Every backend (in-memory, SQL) implements the same operation set.
    Operations are async so backends doing real I/O share one contract
    with the in-memory reference implementation.

    Contract:
        - Identity matching uses EntityId equality (structural), never
          object identity
        - update/delete raise NotFoundError when no record has the identity,
          and leave the store unchanged
        - find_by_id returns None for absence; it never raises for it
    """

    @abstractmethod
    async def insert(self, entity: E) -> None: ...

    @abstractmethod
    async def bulk_insert(self, entities: Sequence[E]) -> None: ...

    @abstractmethod
    async def update(self, entity: E) -> None:
        """
        Replace the stored record sharing entity's identity.

        Raises:
            NotFoundError: If no stored record has that identity
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> None:
        """
        Remove the record with this identity.

        Raises:
            NotFoundError: If no stored record has that identity
        """
        ...

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> E | None: ...

    @abstractmethod
    async def find_all(self) -> list[E]: ...

    @abstractmethod
    def get_entity(self) -> type[E]:
        """Entity class stored by this repository (used in error reporting)."""
        ...


class SearchableRepository(Repository[E, EntityId]):
    """
    Repository that also supports filter/sort/paginate search.

    sortable_fields is the allow-list of attribute names search may order by;
    any other sort field is ignored.
    """

    sortable_fields: Sequence[str] = ()

    @abstractmethod
    async def search(self, params: SearchParams) -> SearchResult[E]:
        """
        Search with filter, sort and pagination applied in that order.

        Args:
            params: Normalized query (always valid by construction)

        Returns:
            SearchResult whose total counts filtered items before paging
        """
        ...
