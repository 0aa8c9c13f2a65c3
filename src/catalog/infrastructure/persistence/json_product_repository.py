"""JSON-file-backed implementation of ProductRepository.

File layout::

    {
      "next_id": 6,
      "products": [
        {"id": 1, "name": "...", "price": "9.99", "stock": 3,
         "status": "ACTIVE", "created_at": "...", "updated_at": "..."}
      ]
    }

``next_id`` only ever grows, so ids of deleted products are not reused.
Timestamps are storage metadata; they back the ``createdAt`` and
``updatedAt`` sort keys but never reach the domain object.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Iterable

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.paging import Pageable, PageResult
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# Whitelisted sort field -> how to read it from a stored record.
_SORT_KEYS: dict[str, Callable[[dict], Any]] = {
    "id": lambda r: r["id"],
    "name": lambda r: r["name"],
    "price": lambda r: Decimal(r["price"]),
    "stock": lambda r: r["stock"],
    "status": lambda r: r["status"],
    "createdAt": lambda r: r["created_at"],
    "updatedAt": lambda r: r["updated_at"],
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        return [self._to_domain(r) for r in self._load()["products"]]

    def find_by_id(self, product_id: int | None) -> Product | None:
        if product_id is None:
            return None
        raw = self._find_raw(self._load()["products"], product_id)
        return self._to_domain(raw) if raw is not None else None

    def save(self, product: Product) -> Product:
        with self._lock:
            data = self._load()
            now = _now()

            if product.id is None:
                new_id = data["next_id"]
                data["next_id"] = new_id + 1
                raw = self._to_raw(product, new_id)
                raw["created_at"] = raw["updated_at"] = now
                data["products"].append(raw)
            else:
                raw = self._find_raw(data["products"], product.id)
                if raw is None:
                    raise ProductNotFoundError(product.id)
                raw.update(self._to_raw(product, product.id))
                raw["updated_at"] = now

            self._persist(data)

        logger.debug("Saved product #%s to %s", raw["id"], self._file_path)
        return self._to_domain(raw)

    def delete_by_id(self, product_id: int | None) -> None:
        if product_id is None:
            return
        with self._lock:
            data = self._load()
            remaining = [r for r in data["products"] if r["id"] != product_id]
            if len(remaining) != len(data["products"]):
                data["products"] = remaining
                self._persist(data)

    def exists_by_id(self, product_id: int | None) -> bool:
        if product_id is None:
            return False
        return self._find_raw(self._load()["products"], product_id) is not None

    def find_page(self, pageable: Pageable) -> PageResult[Product]:
        return self._page(self._load()["products"], pageable)

    def find_page_by_name(self, term: str, pageable: Pageable) -> PageResult[Product]:
        needle = term.lower()
        return self._page(
            (r for r in self._load()["products"] if needle in r["name"].lower()),
            pageable,
        )

    def find_page_by_status(
        self, status: ProductStatus, pageable: Pageable
    ) -> PageResult[Product]:
        return self._page(
            (r for r in self._load()["products"] if r["status"] == status.value),
            pageable,
        )

    def find_page_by_name_and_status(
        self, term: str, status: ProductStatus, pageable: Pageable
    ) -> PageResult[Product]:
        needle = term.lower()
        return self._page(
            (
                r
                for r in self._load()["products"]
                if needle in r["name"].lower() and r["status"] == status.value
            ),
            pageable,
        )

    def transaction(self) -> AbstractContextManager:
        # Re-entrant: methods called inside the block take the same lock.
        return self._lock

    # --- Paging ---------------------------------------------------------------

    def _page(self, records: Iterable[dict], pageable: Pageable) -> PageResult[Product]:
        rows = list(records)
        # Stable sorts applied from the last key to the first give a
        # multi-key ordering with per-key direction.
        for order in reversed(pageable.orders):
            rows.sort(key=_SORT_KEYS[order.field], reverse=order.descending)
        window = rows[pageable.offset : pageable.offset + pageable.size]
        return PageResult(
            items=[self._to_domain(r) for r in window],
            total_elements=len(rows),
            page=pageable.page,
            size=pageable.size,
        )

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _find_raw(records: list[dict], product_id: int) -> dict | None:
        for raw in records:
            if raw["id"] == product_id:
                return raw
        return None

    @staticmethod
    def _to_raw(product: Product, product_id: int) -> dict:
        return {
            "id": product_id,
            "name": product.name,
            "price": str(product.price),
            "stock": product.stock,
            "status": product.status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product.reconstruct(
            product_id=raw["id"],
            name=raw["name"],
            price=Decimal(raw["price"]),
            stock=raw["stock"],
            status=ProductStatus(raw["status"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, data: dict) -> None:
        # Readers only ever see a complete file.
        fd, tmp_name = tempfile.mkstemp(
            prefix=".products-", suffix=".json", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(data, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist({"next_id": 1, "products": []})
