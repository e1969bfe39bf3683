"""
Test suite for the generic InMemoryRepository CRUD operations.

Uses a stub entity so the contract is exercised independently of categories.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

import pytest

from catalog_admin.adapters.in_memory_repository import InMemoryRepository
from catalog_admin.domain.entity import Entity
from catalog_admin.domain.errors import NotFoundError
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


class StubInMemoryRepository(InMemoryRepository[StubEntity, Uuid]):
    def get_entity(self) -> type[StubEntity]:
        return StubEntity


@pytest.fixture()
def repo() -> StubInMemoryRepository:
    return StubInMemoryRepository()


@pytest.fixture()
def entities() -> list[StubEntity]:
    return [
        StubEntity(name="Test1", price=100),
        StubEntity(name="Test2", price=100),
    ]


# ==============================================================================
# insert / bulk_insert / find_all
# ==============================================================================


async def test_insert_appends_entity(repo: StubInMemoryRepository) -> None:
    entity = StubEntity(name="Test", price=100)

    await repo.insert(entity)

    assert repo.items == [entity]
    assert repo.items[0] is entity


async def test_bulk_insert_preserves_order(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    assert repo.items[0] is entities[0]
    assert repo.items[1] is entities[1]


async def test_find_all_returns_insertion_order(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)
    extra = StubEntity(name="Test3", price=1)
    await repo.insert(extra)

    assert await repo.find_all() == [entities[0], entities[1], extra]


async def test_find_all_returns_a_copy(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    found = await repo.find_all()
    found.clear()

    assert len(repo.items) == 2


def test_constructor_seeds_items(entities: list[StubEntity]) -> None:
    repo = StubInMemoryRepository(entities)

    assert repo.items == entities
    assert repo.items is not entities


# ==============================================================================
# update
# ==============================================================================


async def test_update_replaces_matching_entity(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    updated = replace(entities[0], price=150)
    await repo.update(updated)

    assert repo.items[0] is updated
    assert repo.items[0].price == 150
    assert repo.items[1].price == 100


async def test_update_matches_by_identity_value(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    """A freshly allocated but equal identifier finds the stored record."""
    await repo.bulk_insert(entities)

    same_id = Uuid(entities[1].stub_id.id)
    await repo.update(StubEntity(name="Renamed", price=1, stub_id=same_id))

    assert repo.items[1].name == "Renamed"


async def test_update_raises_not_found_and_leaves_store_unchanged(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)
    missing = StubEntity(name="Missing", price=150)

    with pytest.raises(NotFoundError) as exc_info:
        await repo.update(missing)

    assert exc_info.value.context["resource"] == "StubEntity"
    assert exc_info.value.identifier == missing.stub_id
    assert await repo.find_all() == entities


# ==============================================================================
# delete
# ==============================================================================


async def test_delete_removes_entity(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    await repo.delete(Uuid(entities[0].stub_id.id))

    assert await repo.find_all() == [entities[1]]


async def test_delete_raises_not_found_and_leaves_store_unchanged(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    with pytest.raises(NotFoundError):
        await repo.delete(Uuid())

    assert await repo.find_all() == entities


# ==============================================================================
# find_by_id
# ==============================================================================


async def test_find_by_id_returns_none_when_missing(
    repo: StubInMemoryRepository, entities: list[StubEntity]
) -> None:
    await repo.bulk_insert(entities)

    assert await repo.find_by_id(Uuid()) is None


async def test_find_by_id_round_trip(repo: StubInMemoryRepository) -> None:
    entity = StubEntity(name="Test1", price=100)

    await repo.insert(entity)
    found = await repo.find_by_id(Uuid(entity.stub_id.id))

    assert found == entity
