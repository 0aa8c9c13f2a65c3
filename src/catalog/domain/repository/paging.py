"""Pagination value objects shared by the repository port and its callers.

``PageRequest`` is what a caller asks for, ``Pageable`` is the validated
query a repository executes, and ``PageResult`` is what comes back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, TypeVar

from catalog.domain.exceptions import InvalidInputError

T = TypeVar("T")
U = TypeVar("U")

MAX_PAGE_SIZE = 200
DEFAULT_PAGE_SIZE = 20
DEFAULT_SORT = "id,asc"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PageRequest:
    """Client-side paging parameters.

    ``page`` is 0-based; ``size`` must be within 1..200.  Out-of-range
    values are rejected, never clamped.  ``sort`` is kept raw and parsed
    later against the sort whitelist.
    """

    page: int
    size: int
    sort: str | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.page) or self.page < 0:
            raise InvalidInputError(f"Page index must be >= 0, got: {self.page!r}")
        if not _is_int(self.size) or not 1 <= self.size <= MAX_PAGE_SIZE:
            raise InvalidInputError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}, got: {self.size!r}"
            )

    @staticmethod
    def of(page: int, size: int, sort: str | None = None) -> PageRequest:
        return PageRequest(page, size, sort)

    @staticmethod
    def default() -> PageRequest:
        return PageRequest(0, DEFAULT_PAGE_SIZE, DEFAULT_SORT)


class Direction(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: Direction = Direction.ASC

    @property
    def descending(self) -> bool:
        return self.direction == Direction.DESC

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


@dataclass(frozen=True)
class Pageable:
    """A validated page query: offset window plus ordered sort keys."""

    page: int
    size: int
    orders: tuple[SortOrder, ...] = field(default_factory=tuple)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of results plus the metadata needed to navigate."""

    items: list[T]
    total_elements: int
    page: int
    size: int

    def __post_init__(self) -> None:
        if self.items is None:
            raise ValueError("Items list cannot be None")
        if self.total_elements < 0:
            raise ValueError(
                f"Total elements cannot be negative, got: {self.total_elements}"
            )

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 0
        return -(-self.total_elements // self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def map(self, fn: Callable[[T], U]) -> PageResult[U]:
        return PageResult(
            items=[fn(item) for item in self.items],
            total_elements=self.total_elements,
            page=self.page,
            size=self.size,
        )
