"""Error Handlers - global exception handlers for the Products API.

Invariants:
    - ProductsApiError -> its own to_response() body and http_status
    - RequestValidationError -> 400 with the same {"errors": [...]} shape as the rules
    - Exception (catch-all) -> 500 {"error": ...}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProductsApiError), validation (Pydantic), catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from products_api.core import messages
from products_api.core.errors import ProductsApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_products_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_products_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductsApiError)
    async def products_api_error_handler(
        request: Request, exc: ProductsApiError,
    ):
        """Handle all domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": messages.INTERNAL_ERROR},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Map Pydantic errors onto the rule-failure item shape."""
    errors = []
    for e in exc.errors():
        location = "params" if e["loc"][:1] == ("path",) else "body"
        errors.append({
            "type": "field",
            "msg": e["msg"],
            "path": ".".join(str(loc) for loc in e["loc"][1:]),
            "location": location,
        })
    return {"errors": errors}
