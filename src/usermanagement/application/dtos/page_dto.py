"""Paginated view model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from usermanagement.domain.shared.pagination import Page

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PageDTO(Generic[R]):
    """One page of results with its navigation metadata."""

    content: list[R]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_page(cls, page: Page[T], mapper: Callable[[T], R]) -> PageDTO[R]:
        # Every field is derived from the same Page so they cannot disagree
        return cls(
            content=[mapper(item) for item in page.content],
            page_number=page.page_number,
            page_size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.is_first,
            last=page.is_last,
            empty=page.is_empty,
        )
