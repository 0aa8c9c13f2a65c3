"""Product aggregate.

Products have their own lifecycle: they are added to the catalog, renamed,
repriced, restocked, discontinued and eventually removed.  Every field is
private and can only change through a named operation, so the invariants
below hold after every construction and every mutation:

- name is non-empty after trimming
- price is strictly positive
- stock is never negative
- a DISCONTINUED product never becomes ACTIVE again
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum

from catalog.domain.exceptions import InvalidInputError, InvalidStateError


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    DISCONTINUED = "DISCONTINUED"

    @staticmethod
    def from_string(value: str | ProductStatus | None) -> ProductStatus:
        """Parse a status name.

        An empty or missing value means ACTIVE.  Anything else must name a
        known status (case-insensitive) or the call fails.
        """
        if isinstance(value, ProductStatus):
            return value
        if value is None or not value.strip():
            return ProductStatus.ACTIVE
        try:
            return ProductStatus[value.strip().upper()]
        except KeyError:
            valid = ", ".join(s.value for s in ProductStatus)
            raise InvalidInputError(
                f"Invalid product status: '{value}'. Valid values are: {valid}"
            ) from None


class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products and ``Product.reconstruct()``
    when rehydrating from storage.  Both validate every field.
    """

    def __init__(
        self,
        product_id: int | None,
        name: str,
        price: Decimal,
        stock: int,
        status: ProductStatus,
    ) -> None:
        """Raw constructor; performs no validation.  Go through the factories."""
        self._id = product_id
        self._name = name
        self._price = price
        self._stock = stock
        self._status = status

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: str | int | float | Decimal,
        stock: int,
        status: ProductStatus | None = None,
    ) -> Product:
        """Create a new, not yet persisted product."""
        _validate_name(name)
        amount = _validate_price(price)
        _validate_stock(stock)
        if status is not None and not isinstance(status, ProductStatus):
            raise InvalidInputError(f"Invalid product status: {status!r}")
        return Product(
            product_id=None,
            name=name.strip(),
            price=amount,
            stock=stock,
            status=status if status is not None else ProductStatus.ACTIVE,
        )

    @staticmethod
    def reconstruct(
        product_id: int | None,
        name: str,
        price: str | int | float | Decimal,
        stock: int,
        status: ProductStatus,
    ) -> Product:
        """Rebuild a stored product without applying creation defaults."""
        if product_id is None:
            raise InvalidInputError("ID required for reconstruction")
        _validate_name(name)
        amount = _validate_price(price)
        _validate_stock(stock)
        if not isinstance(status, ProductStatus):
            raise InvalidInputError("Status is required")
        return Product(product_id, name.strip(), amount, stock, status)

    # --- Read-only state ------------------------------------------------------

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def status(self) -> ProductStatus:
        return self._status

    # --- Mutations ------------------------------------------------------------

    def rename(self, new_name: str) -> None:
        _validate_name(new_name)
        self._name = new_name.strip()

    def update_price(self, new_price: str | int | float | Decimal) -> None:
        self._price = _validate_price(new_price)

    def adjust_stock(self, new_stock: int) -> None:
        """Set the stock level.  Allowed regardless of status."""
        _validate_stock(new_stock)
        self._stock = new_stock

    def change_status(self, new_status: ProductStatus) -> None:
        """Apply a status transition.

        DISCONTINUED is terminal: moving it back to ACTIVE raises
        InvalidStateError.  Every other transition, including a no-op,
        is applied as-is.
        """
        if not isinstance(new_status, ProductStatus):
            raise InvalidInputError("Status is required")
        if (
            self._status == ProductStatus.DISCONTINUED
            and new_status == ProductStatus.ACTIVE
        ):
            raise InvalidStateError("Cannot reactivate discontinued product")
        self._status = new_status

    # --- Display --------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, price={self._price!r}, "
            f"stock={self._stock!r}, status={self._status.value})"
        )


# ---------------------------------------------------------------------------
# Field validation
# ---------------------------------------------------------------------------


def _validate_name(name: str | None) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidInputError("Name is required")


def _validate_price(price: str | int | float | Decimal | None) -> Decimal:
    """Coerce to Decimal and check the amount is positive."""
    if price is None or isinstance(price, bool):
        raise InvalidInputError("Price must be positive")
    try:
        amount = price if isinstance(price, Decimal) else Decimal(str(price).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidInputError(f"Invalid price: {price!r}") from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError("Price must be positive")
    return amount


def _validate_stock(stock: int | None) -> None:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise InvalidInputError("Stock must be an integer")
    if stock < 0:
        raise InvalidInputError("Stock cannot be negative")
