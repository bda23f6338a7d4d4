"""Product Schemas - response serialization and OpenAPI documentation models.

Invariants:
    - Every success body is an envelope with a single "data" key
    - Request bodies are validated by the rule sets in api/rules.py, not by these
      models; ProductCreate/ProductUpdate only document the expected shape

Design Decisions:
    - ProductRead reads straight from the ORM row (from_attributes)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    name: str = Field(examples=["Monitor curvo 49 pulgadas"])
    price: float = Field(gt=0, examples=[399])


class ProductUpdate(BaseModel):
    """Body of PUT /api/products/{id}."""
    name: str = Field(examples=["Monitor curvo 49 pulgadas"])
    price: float = Field(gt=0, examples=[399])
    availability: bool = Field(examples=[True])


class ProductRead(BaseModel):
    """Public shape of a product record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    availability: bool
    created_at: datetime
    updated_at: datetime


class ProductEnvelope(BaseModel):
    data: ProductRead


class ProductListEnvelope(BaseModel):
    data: list[ProductRead]


class MessageEnvelope(BaseModel):
    data: str


class ErrorResponse(BaseModel):
    """Not-found and server error body."""
    error: str


class FieldErrorItem(BaseModel):
    type: str = "field"
    value: Any = Field(
        default=None,
        description="Offending value; the key is omitted when the field was absent",
    )
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    """400 body: one item per failed rule, in declaration order."""
    errors: list[FieldErrorItem]


def serialize_product(product: Any) -> dict:
    """ORM row -> JSON-ready dict."""
    return ProductRead.model_validate(product).model_dump(mode="json")
