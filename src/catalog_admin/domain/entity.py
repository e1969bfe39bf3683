from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from catalog_admin.domain.value_objects import ValueObject


class Entity(ABC):
    """
    A record with persistent identity.

    Two entities describe the same record when their entity_id values are
    equal, regardless of their current attribute values.
    """

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...
