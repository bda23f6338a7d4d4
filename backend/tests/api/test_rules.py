"""Route Rules - tests for the validation chains declared per route.

Tests cover:
    - empty create body fails 4 checks, empty update body fails 5
    - price 0 / negative fails once, non-numeric price fails twice
    - non-integer id fails exactly once on every by-id route
"""

import pytest

from products_api.api.rules import (
    CREATE_PRODUCT_RULES,
    DELETE_PRODUCT_RULES,
    GET_PRODUCT_RULES,
    TOGGLE_AVAILABILITY_RULES,
    UPDATE_PRODUCT_RULES,
)
from products_api.core.validation import run_checks


def _messages(rules, body=None, params=None):
    errors = run_checks(rules, body=body or {}, params=params or {})
    return [e.message for e in errors]


def test_empty_create_body_fails_four_checks_in_order():
    assert _messages(CREATE_PRODUCT_RULES) == [
        "El nombre del producto es obligatorio",
        "Valor no válido",
        "El precio del producto es obligatorio",
        "Precio no válido",
    ]


def test_empty_update_body_fails_five_checks():
    messages = _messages(UPDATE_PRODUCT_RULES, params={"id": "1"})
    assert len(messages) == 5
    assert messages[-1] == "Valor para disponibilidad no válido"


@pytest.mark.parametrize("price", [0, -1, "-20", 0.0])
def test_non_positive_price_fails_once(price):
    assert _messages(
        CREATE_PRODUCT_RULES, body={"name": "Mouse", "price": price},
    ) == ["Precio no válido"]


def test_non_numeric_price_fails_type_and_positivity():
    assert _messages(
        CREATE_PRODUCT_RULES, body={"name": "Mouse", "price": "hola"},
    ) == ["Valor no válido", "Precio no válido"]


def test_whitespace_name_fails():
    assert _messages(
        CREATE_PRODUCT_RULES, body={"name": "   ", "price": 10},
    ) == ["El nombre del producto es obligatorio"]


@pytest.mark.parametrize("rules", [
    GET_PRODUCT_RULES, TOGGLE_AVAILABILITY_RULES, DELETE_PRODUCT_RULES,
])
def test_by_id_rules_only_check_id(rules):
    assert _messages(rules, params={"id": "abc"}) == ["ID no válido"]
    assert _messages(rules, params={"id": "12"}) == []


def test_update_with_bad_id_and_valid_body_fails_once():
    body = {"name": "Mouse", "price": 10, "availability": True}
    assert _messages(
        UPDATE_PRODUCT_RULES, body=body, params={"id": "abc"},
    ) == ["ID no válido"]
