"""Search query and search result value types.

SearchParams turns raw, untrusted pagination/sort/filter input into a query
that is always safe to use. Malformed input is never an error: every field
falls back to a sane default instead.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from catalog_admin.domain.entity import Entity

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15

E = TypeVar("E", bound=Entity)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def normalize_positive_int(value: Any, default: int) -> int:
    """
    Coerce value to a positive integer, or return default.

    Accepts ints, integral floats and strings holding an integral number
    ("2", "2.0"). Booleans, fractions, zero, negatives, non-finite numbers
    and any other type yield the default.
    """
    if isinstance(value, bool):
        return default

    if isinstance(value, int):
        return value if value > 0 else default

    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default

    if not math.isfinite(number) or not number.is_integer() or number <= 0:
        return default

    return int(number)


def normalize_optional_str(value: Any) -> str | None:
    """None and "" mean "absent"; anything else is stringified."""
    if value is None or value == "":
        return None
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def normalize_sort_dir(value: Any) -> SortDirection:
    if isinstance(value, SortDirection):
        return value
    if isinstance(value, str) and value.lower() == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC


@dataclass(frozen=True, slots=True)
class SearchParams:
    """
    Canonical search query.

    Any value may be passed for any field; __post_init__ replaces it with
    its normalized form:

    - page: positive int, default 1
    - per_page: positive int, default 15
    - sort: field name or None
    - sort_dir: SortDirection, default ASC (unused when sort is None)
    - filter: string or None
    """

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    sort: str | None = None
    sort_dir: SortDirection = SortDirection.ASC
    filter: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", normalize_positive_int(self.page, DEFAULT_PAGE))
        object.__setattr__(
            self, "per_page", normalize_positive_int(self.per_page, DEFAULT_PER_PAGE)
        )
        object.__setattr__(self, "sort", normalize_optional_str(self.sort))
        object.__setattr__(self, "sort_dir", normalize_sort_dir(self.sort_dir))
        object.__setattr__(self, "filter", normalize_optional_str(self.filter))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> SearchParams:
        """
        Build params from an untyped mapping (e.g. query string values).

        Missing keys and unknown keys are both fine.
        """
        raw = raw or {}
        return cls(
            page=raw.get("page"),
            per_page=raw.get("per_page"),
            sort=raw.get("sort"),
            sort_dir=raw.get("sort_dir"),
            filter=raw.get("filter"),
        )


@dataclass(frozen=True)
class SearchResult(Generic[E]):
    """One page of search results plus pagination metadata."""

    items: list[E]
    total: int  # Matching items before paging
    current_page: int
    per_page: int
    last_page: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", list(self.items))
        object.__setattr__(self, "last_page", max(1, math.ceil(self.total / self.per_page)))

    def to_dict(self, force_entity: bool = False) -> dict[str, Any]:
        """
        Plain structure for rendering.

        Args:
            force_entity: Serialize each item with its own to_dict() instead of
                returning the entities themselves
        """
        return {
            "items": [item.to_dict() for item in self.items] if force_entity else self.items,
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
