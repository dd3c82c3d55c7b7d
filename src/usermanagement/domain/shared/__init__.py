"""Shared domain components.

This module exports shared exceptions, pagination primitives and time
helpers used across the domain.
"""

from usermanagement.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from usermanagement.domain.shared.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    Page,
    PageRequest,
    SortDirection,
)
from usermanagement.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Pagination
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_FIELD",
    "Page",
    "PageRequest",
    "SortDirection",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
