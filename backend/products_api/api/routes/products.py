"""Product Routes - CRUD handlers bound to /api/products.

Invariants:
    - Every route depends on validate_request(<rules>) before get_db: a request
      that fails its rules is answered 400 without touching the store
    - By-id handlers look the row up through get_product_or_404, so an absent id
      is always 404 {"error": "Producto no encontrado"}
    - One persistence operation per request, committed before responding
    - Success bodies are {"data": ...}

Design Decisions:
    - Handlers receive ValidatedRequest instead of Pydantic bodies so that the
      rules (not Pydantic) decide the 400 error list
    - OpenAPI request bodies and the integer id parameter are declared through
      openapi_extra, since neither is a typed handler argument
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.api.error_shaping import ValidatedRequest, validate_request
from products_api.api.rules import (
    CREATE_PRODUCT_RULES,
    DELETE_PRODUCT_RULES,
    GET_PRODUCT_RULES,
    TOGGLE_AVAILABILITY_RULES,
    UPDATE_PRODUCT_RULES,
)
from products_api.core import messages
from products_api.core.errors import ProductNotFoundError
from products_api.core.validation import to_bool, to_int, to_number, to_trimmed
from products_api.infrastructure.database import get_db
from products_api.models.product import Product
from products_api.schemas.product import (
    ErrorResponse,
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductUpdate,
    ValidationErrorResponse,
    serialize_product,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])

# Ids outside the INTEGER column range cannot exist in the table
_MIN_ID = 1
_MAX_ID = 2**31 - 1
_MAX_ID_DIGITS = len(str(_MAX_ID))

_ID_PARAMETER = {
    "name": "id",
    "in": "path",
    "required": True,
    "description": "Product id",
    "schema": {"type": "integer"},
}

_INVALID = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
}
_INVALID_OR_MISSING = {
    **_INVALID,
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _openapi(body: type[BaseModel] | None = None, with_id: bool = False) -> dict:
    extra: dict = {}
    if with_id:
        extra["parameters"] = [_ID_PARAMETER]
    if body is not None:
        extra["requestBody"] = {
            "required": True,
            "content": {
                "application/json": {"schema": body.model_json_schema()},
            },
        }
    return extra


def _product_id(validated: ValidatedRequest) -> int:
    raw = validated.params["id"]
    if len(raw.lstrip("+-")) > _MAX_ID_DIGITS:
        raise ProductNotFoundError(raw)
    return to_int(raw)


async def get_product_or_404(product_id: int, db: AsyncSession) -> Product:
    """Get product or raise ProductNotFoundError."""
    product = None
    if _MIN_ID <= product_id <= _MAX_ID:
        result = await db.execute(
            select(Product).where(Product.id == product_id),
        )
        product = result.scalar_one_or_none()
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.get("", response_model=ProductListEnvelope)
@router.get("/", response_model=ProductListEnvelope, include_in_schema=False)
async def list_products(db: AsyncSession = Depends(get_db)):
    """List every product, oldest first."""
    result = await db.execute(select(Product).order_by(Product.id))
    return {"data": [serialize_product(p) for p in result.scalars().all()]}


@router.get(
    "/{id}",
    response_model=ProductEnvelope,
    responses=_INVALID_OR_MISSING,
    openapi_extra=_openapi(with_id=True),
)
async def get_product(
    validated: ValidatedRequest = Depends(validate_request(GET_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Get one product by id."""
    product = await get_product_or_404(_product_id(validated), db)
    return {"data": serialize_product(product)}


@router.post(
    "",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    openapi_extra=_openapi(ProductCreate),
)
@router.post(
    "/",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_product(
    validated: ValidatedRequest = Depends(validate_request(CREATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Create a product. Availability starts as true."""
    product = Product(
        name=to_trimmed(validated.body["name"]),
        price=to_number(validated.body["price"]),
    )
    db.add(product)
    await db.commit()
    await db.refresh(product)
    logger.info("Product created", extra={"product_id": product.id})
    return {"data": serialize_product(product)}


@router.put(
    "/{id}",
    response_model=ProductEnvelope,
    responses=_INVALID_OR_MISSING,
    openapi_extra=_openapi(ProductUpdate, with_id=True),
)
async def update_product(
    validated: ValidatedRequest = Depends(validate_request(UPDATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Replace name, price and availability of a product."""
    product = await get_product_or_404(_product_id(validated), db)
    product.name = to_trimmed(validated.body["name"])
    product.price = to_number(validated.body["price"])
    product.availability = to_bool(validated.body["availability"])
    await db.commit()
    await db.refresh(product)
    logger.info("Product updated", extra={"product_id": product.id})
    return {"data": serialize_product(product)}


@router.patch(
    "/{id}",
    response_model=ProductEnvelope,
    responses=_INVALID_OR_MISSING,
    openapi_extra=_openapi(with_id=True),
)
async def toggle_availability(
    validated: ValidatedRequest = Depends(
        validate_request(TOGGLE_AVAILABILITY_RULES),
    ),
    db: AsyncSession = Depends(get_db),
):
    """Flip the availability flag of a product."""
    product = await get_product_or_404(_product_id(validated), db)
    product.availability = not product.availability
    await db.commit()
    await db.refresh(product)
    logger.info(
        f"Product availability set to {product.availability}",
        extra={"product_id": product.id},
    )
    return {"data": serialize_product(product)}


@router.delete(
    "/{id}",
    response_model=MessageEnvelope,
    responses=_INVALID_OR_MISSING,
    openapi_extra=_openapi(with_id=True),
)
async def delete_product(
    validated: ValidatedRequest = Depends(validate_request(DELETE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    """Delete a product."""
    product = await get_product_or_404(_product_id(validated), db)
    await db.delete(product)
    await db.commit()
    logger.info("Product deleted", extra={"product_id": product.id})
    return {"data": messages.PRODUCT_DELETED}
