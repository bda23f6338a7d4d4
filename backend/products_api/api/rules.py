"""Request Rules - the validation chain declared for each product route.

Invariants:
    - Checks run in the order written here; the 400 body lists failures in that order
    - Create: 4 checks on an empty body fail (name x1, price x3)
    - Update: path id + the create checks + availability (5 fail on an empty body)
    - By-id routes without a body only check that the path id is an integer
"""

from products_api.core import messages
from products_api.core.validation import (
    body_check, param_check,
    is_boolean, is_int, is_not_empty, is_numeric, is_positive,
)

PRODUCT_ID_RULES = (
    param_check("id", is_int, messages.INVALID_ID),
)

PRODUCT_BODY_RULES = (
    body_check("name", is_not_empty, messages.NAME_REQUIRED),
    body_check("price", is_numeric, messages.INVALID_VALUE),
    body_check("price", is_not_empty, messages.PRICE_REQUIRED),
    body_check("price", is_positive, messages.INVALID_PRICE),
)

CREATE_PRODUCT_RULES = PRODUCT_BODY_RULES

UPDATE_PRODUCT_RULES = (
    *PRODUCT_ID_RULES,
    *PRODUCT_BODY_RULES,
    body_check("availability", is_boolean, messages.INVALID_AVAILABILITY),
)

GET_PRODUCT_RULES = PRODUCT_ID_RULES
TOGGLE_AVAILABILITY_RULES = PRODUCT_ID_RULES
DELETE_PRODUCT_RULES = PRODUCT_ID_RULES
