"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInputError(DomainException):
    """A field failed its own validation rule."""


class InvalidStateError(DomainException):
    """A valid value violates a business rule on the current state."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int | None) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id
