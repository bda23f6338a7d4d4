"""Request Validation - declarative field checks and the pure rule runner.

Invariants:
    - A rule set is an ordered tuple of FieldCheck; order is the error order
    - run_checks evaluates every check, never stops at the first failure
    - A field may fail more than one check; failures are never deduplicated
    - Predicates see the raw value (MISSING when the field is absent) and
      never raise

Design Decisions:
    - Predicates compare the value's text form, so "50" and 50 are both numeric
      and booleans are not
    - Sanitizers (to_number, to_bool) are only called on values whose checks
      already passed
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Sequence

Location = Literal["body", "params"]

_NUMERIC = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT = re.compile(r"[-+]?(0|[1-9][0-9]*)")
_BOOLEAN_STRINGS = {"true": True, "false": False, "1": True, "0": False}


class _Missing:
    """Marker for a field absent from the request."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class FieldCheck:
    """One rule: the named field must satisfy predicate, else report message."""
    field: str
    predicate: Callable[[Any], bool]
    message: str
    location: Location = "body"


@dataclass(frozen=True)
class FieldError:
    """One failed check, carrying the offending value when there was one."""
    field: str
    message: str
    location: Location
    value: Any = MISSING

    def to_dict(self) -> dict:
        error: dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            error["value"] = self.value
        error["msg"] = self.message
        error["path"] = self.field
        error["location"] = self.location
        return error


def body_check(
    field: str, predicate: Callable[[Any], bool], message: str,
) -> FieldCheck:
    return FieldCheck(field, predicate, message, "body")


def param_check(
    field: str, predicate: Callable[[Any], bool], message: str,
) -> FieldCheck:
    return FieldCheck(field, predicate, message, "params")


def run_checks(
    rules: Sequence[FieldCheck],
    *,
    body: Mapping[str, Any],
    params: Mapping[str, Any],
) -> list[FieldError]:
    """Evaluate rules in order against the request and collect every failure."""
    sources: dict[str, Mapping[str, Any]] = {"body": body, "params": params}
    errors: list[FieldError] = []
    for check in rules:
        value = sources[check.location].get(check.field, MISSING)
        if not check.predicate(value):
            errors.append(
                FieldError(check.field, check.message, check.location, value),
            )
    return errors


# --- Predicates ---------------------------------------------------------------

def as_text(value: Any) -> str:
    """Text form of a JSON value; absent, null and containers read as ''."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return value
    return ""


def is_not_empty(value: Any) -> bool:
    return as_text(value).strip() != ""


def is_numeric(value: Any) -> bool:
    return _NUMERIC.fullmatch(as_text(value)) is not None


def is_positive(value: Any) -> bool:
    if not is_numeric(value):
        return False
    number = float(as_text(value))
    return math.isfinite(number) and number > 0


def is_int(value: Any) -> bool:
    return _INT.fullmatch(as_text(value)) is not None


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


# --- Sanitizers ---------------------------------------------------------------

def to_number(value: Any) -> float:
    return float(as_text(value))


def to_int(value: Any) -> int:
    return int(as_text(value))


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return _BOOLEAN_STRINGS[value]


def to_trimmed(value: Any) -> str:
    return as_text(value).strip()
