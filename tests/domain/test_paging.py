"""Unit tests for PageRequest and PageResult."""

import pytest

from catalog.domain.exceptions import InvalidInputError
from catalog.domain.repository.paging import PageRequest, PageResult


class TestPageRequest:

    @pytest.mark.parametrize("page,size", [(0, 1), (0, 200), (5, 20)])
    def test_boundary_values_accepted(self, page, size):
        request = PageRequest.of(page, size, "name,asc")
        assert (request.page, request.size, request.sort) == (page, size, "name,asc")

    def test_negative_page_rejected(self):
        with pytest.raises(InvalidInputError, match="Page index must be >= 0"):
            PageRequest(-1, 20)

    @pytest.mark.parametrize("size", [0, -1, 201])
    def test_size_out_of_range_rejected(self, size):
        with pytest.raises(InvalidInputError, match="between 1 and 200"):
            PageRequest(0, size)

    def test_values_are_not_clamped(self):
        with pytest.raises(InvalidInputError):
            PageRequest(0, 1000)

    def test_default_request(self):
        request = PageRequest.default()
        assert (request.page, request.size, request.sort) == (0, 20, "id,asc")


class TestPageResult:

    def test_total_pages_rounds_up(self):
        assert PageResult([], total_elements=10, page=0, size=3).total_pages == 4

    def test_total_pages_exact_division(self):
        assert PageResult([], total_elements=9, page=0, size=3).total_pages == 3

    def test_total_pages_zero_when_size_zero(self):
        assert PageResult([], total_elements=10, page=0, size=0).total_pages == 0

    def test_total_pages_zero_when_empty(self):
        assert PageResult([], total_elements=0, page=0, size=20).total_pages == 0

    @pytest.mark.parametrize(
        "page,has_next,has_previous",
        [(0, True, False), (2, True, True), (3, False, True)],
    )
    def test_navigation_flags(self, page, has_next, has_previous):
        result = PageResult([], total_elements=10, page=page, size=3)
        assert result.has_next is has_next
        assert result.has_previous is has_previous

    def test_empty_result_has_no_next(self):
        assert PageResult([], total_elements=0, page=0, size=20).has_next is False

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            PageResult([], total_elements=-1, page=0, size=20)

    def test_none_items_rejected(self):
        with pytest.raises(ValueError, match="cannot be None"):
            PageResult(None, total_elements=0, page=0, size=20)

    def test_map_keeps_metadata(self):
        result = PageResult([1, 2], total_elements=7, page=1, size=2).map(str)
        assert result.items == ["1", "2"]
        assert (result.total_elements, result.page, result.size) == (7, 1, 2)
