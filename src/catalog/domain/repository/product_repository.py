"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Implementations must uphold two guarantees:

- ``save()`` on a product that carries an id updates an existing record
  and raises ProductNotFoundError when there is none.  It never inserts.
- Work done inside ``transaction()`` is atomic with respect to other
  units of work on the same repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.paging import Pageable, PageRequest, PageResult
from catalog.domain.service.product_search import ProductSearchEngine


class ProductRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_id(self, product_id: int | None) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert a new product or update an existing one.

        Returns the persisted product; new products come back with an id.
        """

    @abstractmethod
    def delete_by_id(self, product_id: int | None) -> None:
        """Remove a product.  Unknown or None ids are ignored."""

    @abstractmethod
    def exists_by_id(self, product_id: int | None) -> bool:
        """Return True if a product with this ID is stored."""

    # --- Paged lookups --------------------------------------------------------

    @abstractmethod
    def find_page(self, pageable: Pageable) -> PageResult[Product]:
        """Return one page of all products."""

    @abstractmethod
    def find_page_by_name(self, term: str, pageable: Pageable) -> PageResult[Product]:
        """Return one page of products whose name contains *term*, ignoring case."""

    @abstractmethod
    def find_page_by_status(
        self, status: ProductStatus, pageable: Pageable
    ) -> PageResult[Product]:
        """Return one page of products with the given status."""

    @abstractmethod
    def find_page_by_name_and_status(
        self, term: str, status: ProductStatus, pageable: Pageable
    ) -> PageResult[Product]:
        """Return one page of products matching both name and status."""

    # --- Template operations --------------------------------------------------

    def search(
        self,
        query: str | None,
        status: ProductStatus | str | None,
        page_request: PageRequest,
    ) -> PageResult[Product]:
        """Filtered, sorted, paginated search over the catalog."""
        return ProductSearchEngine(self).search(query, status, page_request)

    def transaction(self) -> AbstractContextManager:
        """Unit-of-work boundary.  No-op unless the adapter needs one."""
        return nullcontext()
