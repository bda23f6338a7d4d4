"""Error Hierarchy - typed exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), an http_status (int) and a to_response()
    - Validation failures render as {"errors": [...]}, everything else as
      {"error": "<message>"}; the two shapes are never mixed
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy under ProductsApiError: one FastAPI handler catches all
"""

from typing import Sequence

from products_api.core import messages
from products_api.core.validation import FieldError


class ProductsApiError(Exception):
    """Base exception for all Products API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(ProductsApiError):
    """One or more request rules failed."""

    def __init__(self, errors: Sequence[FieldError]):
        super().__init__(
            f"{len(errors)} validation error(s)", "VALIDATION_ERROR", 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"errors": [e.to_dict() for e in self.errors]}


class ProductNotFoundError(ProductsApiError):
    """No product has the requested id."""

    def __init__(self, product_id: int | str):
        super().__init__(
            messages.PRODUCT_NOT_FOUND, "PRODUCT_NOT_FOUND", 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductsApiError):
    """Database operation failed."""

    def __init__(self, detail: str, operation: str):
        super().__init__(
            messages.DATABASE_UNAVAILABLE, "DATABASE_ERROR", 503,
        )
        self.detail = detail
        self.operation = operation
