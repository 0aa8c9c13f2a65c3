"""Domain service: Product Search.

Turns untrusted, optional search inputs into a safe, deterministic page
query against the product repository:

- the free-text term is trimmed; blank means "no filter"
- the status filter is mapped to its canonical member or "no filter"
- the sort string is parsed against a fixed whitelist of fields
- exactly one of four repository lookups is chosen by which filters
  are present

The engine never rejects a request.  Paging bounds are enforced when the
PageRequest is built, and unknown sort fields are dropped silently.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.paging import (
    Direction,
    Pageable,
    PageRequest,
    PageResult,
    SortOrder,
)

if TYPE_CHECKING:
    from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SORT_WHITELIST = frozenset(
    {"id", "name", "price", "stock", "status", "createdAt", "updatedAt"}
)
DEFAULT_ORDER = (SortOrder("id", Direction.ASC),)


def parse_sort(sort: str | None) -> tuple[SortOrder, ...]:
    """Parse ``"field,dir;field,dir"`` into sort orders.

    Fields outside the whitelist are skipped.  Direction is DESC only when
    the token is ``desc`` (any case); otherwise ASC.  Falls back to
    ``id asc`` when nothing usable remains.
    """
    if sort is None or not sort.strip():
        return DEFAULT_ORDER

    orders: list[SortOrder] = []
    for clause in sort.split(";"):
        parts = clause.strip().split(",")
        field = parts[0].strip()
        if field not in SORT_WHITELIST:
            if field:
                logger.debug("Ignoring sort on non-whitelisted field %r", field)
            continue
        token = parts[1].strip().lower() if len(parts) > 1 else "asc"
        direction = Direction.DESC if token == "desc" else Direction.ASC
        orders.append(SortOrder(field, direction))

    return tuple(orders) if orders else DEFAULT_ORDER


def normalize_term(query: str | None) -> str | None:
    if query is None:
        return None
    term = query.strip()
    return term or None


def normalize_status(status: ProductStatus | str | None) -> ProductStatus | None:
    if status is None:
        return None
    if isinstance(status, str) and not status.strip():
        return None
    return ProductStatus.from_string(status)


class ProductSearchEngine:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def search(
        self,
        query: str | None,
        status: ProductStatus | str | None,
        page_request: PageRequest,
    ) -> PageResult[Product]:
        term = normalize_term(query)
        status_filter = normalize_status(status)
        pageable = Pageable(
            page=page_request.page,
            size=page_request.size,
            orders=parse_sort(page_request.sort),
        )

        logger.debug(
            "Searching products: query=%s, status=%s, page=%d, size=%d, sort=%s",
            repr(term) if term is not None else "*",
            status_filter.value if status_filter is not None else "*",
            pageable.page,
            pageable.size,
            ", ".join(str(o) for o in pageable.orders),
        )

        if term is not None and status_filter is not None:
            found = self._product_repo.find_page_by_name_and_status(
                term, status_filter, pageable
            )
        elif term is not None:
            found = self._product_repo.find_page_by_name(term, pageable)
        elif status_filter is not None:
            found = self._product_repo.find_page_by_status(status_filter, pageable)
        else:
            found = self._product_repo.find_page(pageable)

        logger.debug(
            "Search completed: found %d of %d total products",
            len(found.items),
            found.total_elements,
        )

        # Metadata echoes the request; the total comes from the repository.
        return PageResult(
            items=list(found.items),
            total_elements=found.total_elements,
            page=page_request.page,
            size=page_request.size,
        )
