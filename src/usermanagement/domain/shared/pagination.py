"""Pagination and sorting primitives shared by repositories and services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_FIELD = "id"


class SortDirection(str, Enum):
    """Sort direction for paged queries."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str | None) -> SortDirection:
        # Anything other than "desc" sorts ascending
        if value is not None and value.strip().upper() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and ordering of a paged query."""

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_FIELD
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            msg = f"Page index must not be negative: {self.page}"
            raise ValueError(msg)
        if self.size < 1:
            msg = f"Page size must be at least 1: {self.size}"
            raise ValueError(msg)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a result set plus the total element count.

    All derived values come from ``content``, ``total_elements`` and the
    request that produced the page, so they are always mutually consistent.
    """

    content: list[T]
    page_number: int
    page_size: int
    total_elements: int

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total: int) -> Page[T]:
        return cls(
            content=list(content),
            page_number=request.page,
            page_size=request.size,
            total_elements=total,
        )

    @property
    def total_pages(self) -> int:
        if self.page_size < 1:
            return 1
        return ceil(self.total_elements / self.page_size)

    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @property
    def is_last(self) -> bool:
        return self.page_number + 1 >= self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.content
