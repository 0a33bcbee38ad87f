"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility, so pydantic validators surface them as field errors.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StoreError(RuntimeError):
    """The backing store failed (unreachable, constraint violation, corrupt row).

    Not a DomainError, so it is never caught as a missing record.
    """


def supplier_not_found(supplier_id: int) -> str:
    """Return message for missing supplier."""
    return f"Supplier {supplier_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_instant(text: str) -> str:
    """Return message for an unparseable timestamp."""
    return f"Invalid timestamp '{text}': expected ISO-8601 with an explicit UTC offset"


def non_finite_value(value: float) -> str:
    """Return message for an infinite or NaN transaction value."""
    return f"TransactionValueNOK must be a finite number, got {value}"
