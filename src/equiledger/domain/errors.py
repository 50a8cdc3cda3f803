"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for this supplier."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class PersistenceError(DomainError):
    """The ledger store failed to complete an operation."""


def sale_not_found(sale_id: str) -> str:
    """Return message for missing sale."""
    return f"Sale {sale_id} not found"


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def product_not_found(product_id: str) -> str:
    """Return message for missing product."""
    return f"Product {product_id} not found"


def client_not_found(client_id: str) -> str:
    """Return message for missing supplier client."""
    return f"Client {client_id} not found"


def missing_supplier() -> str:
    """Return message when no supplier is selected."""
    return "No supplier selected. Pass --supplier or set EQUILEDGER_SUPPLIER_ID."


def invalid_month_key(month_key: str) -> str:
    """Return message for a malformed YYYY-MM key."""
    return f"Invalid month '{month_key}'. Expected YYYY-MM"


def tax_rate_out_of_range(tax_rate) -> str:
    """Return message for a tax rate outside 0-100."""
    return f"Tax rate must be between 0 and 100, got {tax_rate}"


def negative_amount(field: str, value) -> str:
    """Return message for a monetary field that must not be negative."""
    return f"{field} must not be negative, got {value}"


def too_many_decimals(field: str, value) -> str:
    """Return message for a value with more than two decimal places."""
    return f"{field} must have at most 2 decimal places, got {value}"
