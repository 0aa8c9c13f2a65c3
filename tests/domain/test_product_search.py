"""Unit tests for the product search engine: sort parsing and query dispatch."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import InvalidInputError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.paging import Direction, PageRequest, SortOrder
from catalog.domain.service.product_search import (
    DEFAULT_ORDER,
    ProductSearchEngine,
    normalize_status,
    normalize_term,
    parse_sort,
)
from tests.fakes import RecordingProductRepository


def _catalog() -> list[Product]:
    return [
        Product.reconstruct(1, "Blue Widget", Decimal("10.00"), 5, ProductStatus.ACTIVE),
        Product.reconstruct(2, "Red Widget", Decimal("12.50"), 0, ProductStatus.DISCONTINUED),
        Product.reconstruct(3, "Gadget", Decimal("99.99"), 7, ProductStatus.ACTIVE),
        Product.reconstruct(4, "widget mini", Decimal("5.00"), 2, ProductStatus.ACTIVE),
        Product.reconstruct(5, "Gizmo", Decimal("12.50"), 1, ProductStatus.ACTIVE),
    ]


# ── Sort parsing ─────────────────────────────────────────────────────────────


class TestParseSort:

    def test_unknown_field_dropped(self):
        assert parse_sort("price,desc;malicious_field,asc") == (
            SortOrder("price", Direction.DESC),
        )

    def test_only_unknown_fields_falls_back_to_default(self):
        assert parse_sort("bogus,asc") == (SortOrder("id", Direction.ASC),)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_spec_falls_back_to_default(self, raw):
        assert parse_sort(raw) == DEFAULT_ORDER

    def test_multiple_keys_keep_order(self):
        assert parse_sort("status,asc;price,desc;name") == (
            SortOrder("status", Direction.ASC),
            SortOrder("price", Direction.DESC),
            SortOrder("name", Direction.ASC),
        )

    def test_direction_is_case_insensitive(self):
        assert parse_sort("name, DESC ") == (SortOrder("name", Direction.DESC),)

    def test_unknown_direction_means_ascending(self):
        assert parse_sort("stock,sideways") == (SortOrder("stock", Direction.ASC),)

    def test_field_names_are_trimmed_but_case_sensitive(self):
        assert parse_sort(" createdAt ,desc") == (SortOrder("createdAt", Direction.DESC),)
        assert parse_sort("CREATEDAT,desc") == DEFAULT_ORDER

    def test_injection_attempt_dropped(self):
        assert parse_sort("name; DROP TABLE products,desc") == (
            SortOrder("name", Direction.ASC),
        )


class TestNormalization:

    @pytest.mark.parametrize("raw,expected", [(None, None), ("", None), ("  ", None), (" Wid ", "Wid")])
    def test_term(self, raw, expected):
        assert normalize_term(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_blank_status_means_no_filter(self, raw):
        assert normalize_status(raw) is None

    def test_status_string_is_canonicalised(self):
        assert normalize_status("discontinued") == ProductStatus.DISCONTINUED

    def test_unknown_status_rejected(self):
        with pytest.raises(InvalidInputError):
            normalize_status("ARCHIVED")


# ── Dispatch ─────────────────────────────────────────────────────────────────


class TestSearchDispatch:

    def test_term_and_status(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search(" widget ", "ACTIVE", PageRequest(0, 10))

        assert repo.calls[0][:3] == ("name_and_status", "widget", ProductStatus.ACTIVE)
        assert [p.id for p in result.items] == [1, 4]

    def test_term_only(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search("WIDGET", None, PageRequest(0, 10))

        assert repo.calls[0][:2] == ("name", "WIDGET")
        assert [p.id for p in result.items] == [1, 2, 4]

    def test_status_only(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search("   ", ProductStatus.DISCONTINUED, PageRequest(0, 10))

        assert repo.calls[0][:2] == ("status", ProductStatus.DISCONTINUED)
        assert [p.id for p in result.items] == [2]

    def test_no_filters(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search(None, "", PageRequest(0, 10))

        assert repo.calls[0][0] == "all"
        assert result.total_elements == 5

    def test_pageable_carries_parsed_sort(self):
        repo = RecordingProductRepository(_catalog())
        ProductSearchEngine(repo).search(None, None, PageRequest(1, 2, "price,desc;evil,asc"))

        pageable = repo.calls[0][-1]
        assert (pageable.page, pageable.size) == (1, 2)
        assert pageable.orders == (SortOrder("price", Direction.DESC),)


class TestSearchPaging:

    def test_multi_key_sort(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search(
            None, None, PageRequest(0, 10, "price,desc;name,asc")
        )
        assert [p.id for p in result.items] == [3, 5, 2, 1, 4]

    def test_second_page_and_metadata(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search(None, None, PageRequest(1, 2))

        assert [p.id for p in result.items] == [3, 4]
        assert result.total_elements == 5
        assert (result.page, result.size) == (1, 2)
        assert result.total_pages == 3
        assert result.has_next and result.has_previous

    def test_page_past_the_end_is_empty_but_keeps_total(self):
        repo = RecordingProductRepository(_catalog())
        result = ProductSearchEngine(repo).search(None, None, PageRequest(9, 2))

        assert result.items == []
        assert result.total_elements == 5
        assert result.page == 9

    def test_repository_search_delegates_to_engine(self):
        repo = RecordingProductRepository(_catalog())
        result = repo.search("gizmo", None, PageRequest.default())

        assert repo.calls[0][0] == "name"
        assert [p.name for p in result.items] == ["Gizmo"]
