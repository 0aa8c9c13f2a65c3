"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands and queries carry caller input into the application layer
unvalidated; validation happens at the Product / PageRequest boundary.
Output DTOs flatten domain objects for display without exposing them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.repository.paging import PageResult

# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class CreateProductCommand:
    name: str
    price: str | int | float | Decimal
    stock: int
    status: str | None = None


@dataclass(frozen=True)
class UpdateProductCommand:
    id: int
    name: str
    price: str | int | float | Decimal
    stock: int
    status: str | None


@dataclass(frozen=True)
class DeleteProductCommand:
    id: int


@dataclass(frozen=True)
class SearchProductsQuery:
    """Input: optional name term and status filter plus paging."""

    term: str | None = None
    status: str | None = None
    page: int = 0
    size: int = 50
    sort: str | None = None


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: int | None
    name: str
    price: str  # plain decimal string, e.g. "9.99"
    stock: int
    status: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=format(product.price, "f"),
            stock=product.stock,
            status=product.status.value,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PagedProductsDTO:
    items: list[ProductDTO]
    total_elements: int
    page: int
    size: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @staticmethod
    def from_page(result: PageResult[Product]) -> PagedProductsDTO:
        page = result.map(ProductDTO.from_domain)
        return PagedProductsDTO(
            items=page.items,
            total_elements=page.total_elements,
            page=page.page,
            size=page.size,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )

    def to_dict(self) -> dict:
        return asdict(self)
