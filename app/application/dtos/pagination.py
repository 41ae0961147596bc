"""Pagination parameters and the paged result envelope."""

import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, computed_field

from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")

_DERIVED_FIELDS = {"total_pages", "has_previous_page", "has_next_page"}


@dataclass(frozen=True)
class PaginationParams:
    """Normalised page request.

    Out-of-range input is coerced rather than rejected: page < 1 becomes 1,
    and page_size outside 1..100 becomes the default of 20.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page: int, page_size: int) -> "PaginationParams":
        if page < 1:
            page = DEFAULT_PAGE
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            page_size = DEFAULT_PAGE_SIZE
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PagedResult(BaseModel, Generic[T]):
    """One page of items with navigation metadata derived from the counts."""

    items: list[T]
    page: int
    page_size: int
    total_count: int

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    def to_cache(self) -> dict[str, Any]:
        """Return the stored fields only; derived fields are recomputed on read."""
        return self.model_dump(mode="json", exclude=_DERIVED_FIELDS)
