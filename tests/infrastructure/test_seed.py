"""Tests for the sample catalog seeder."""

from catalog.domain.model.product import ProductStatus
from catalog.infrastructure.persistence.seed import SAMPLE_PRODUCTS, seed_catalog
from tests.fakes import FakeProductRepository


class TestSeedCatalog:

    def test_seeds_empty_catalog(self):
        repo = FakeProductRepository()
        assert seed_catalog(repo) == len(SAMPLE_PRODUCTS)

        products = repo.find_all()
        assert len(products) == 5
        discontinued = [p.name for p in products if p.status == ProductStatus.DISCONTINUED]
        assert discontinued == ["Samsung Galaxy S24"]

    def test_is_idempotent(self):
        repo = FakeProductRepository()
        seed_catalog(repo)
        assert seed_catalog(repo) == 0
        assert len(repo.find_all()) == 5
