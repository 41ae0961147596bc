"""PaginationParams normalisation and PagedResult metadata."""

import pytest

from app.application.dtos.pagination import PagedResult, PaginationParams


@pytest.mark.parametrize(
    "page,size,expected",
    [
        (1, 20, (1, 20)),
        (3, 100, (3, 100)),
        (0, 20, (1, 20)),
        (-4, 10, (1, 10)),
        (2, 0, (2, 20)),
        (2, 101, (2, 20)),
    ],
)
def test_normalize(page: int, size: int, expected: tuple[int, int]) -> None:
    params = PaginationParams.normalize(page, size)
    assert (params.page, params.page_size) == expected


def test_offset() -> None:
    assert PaginationParams.normalize(3, 10).offset == 20


@pytest.mark.parametrize(
    "page,size,total,pages,prev,nxt",
    [
        (1, 20, 0, 0, False, False),
        (1, 20, 20, 1, False, False),
        (1, 20, 21, 2, False, True),
        (2, 20, 21, 2, True, False),
        (5, 20, 21, 2, True, False),
    ],
)
def test_derived_fields(page, size, total, pages, prev, nxt) -> None:
    result = PagedResult[int](items=[], page=page, page_size=size, total_count=total)
    assert result.total_pages == pages
    assert result.has_previous_page is prev
    assert result.has_next_page is nxt


def test_serialization_includes_derived_fields_but_cache_form_does_not() -> None:
    result = PagedResult[int](items=[1], page=1, page_size=1, total_count=2)
    dumped = result.model_dump()
    assert dumped["total_pages"] == 2
    assert dumped["has_next_page"] is True
    assert result.to_cache() == {"items": [1], "page": 1, "page_size": 1, "total_count": 2}
