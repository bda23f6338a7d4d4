"""Error Shaping - runs a route's rules and stops the request on any failure.

Invariants:
    - The dependency raises InputValidationError when at least one check
      failed; the route handler never runs in that case
    - Routes declare it before get_db, so a rejected request never opens a session
    - A missing, malformed or non-object JSON body is read as {}

Design Decisions:
    - Raising instead of returning a response: the single 400 shape is produced
      by the ProductsApiError handler in error_handlers.py
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Sequence

from fastapi import Request

from products_api.core.errors import InputValidationError
from products_api.core.validation import FieldCheck, run_checks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedRequest:
    """Request inputs that passed every rule of the route."""
    body: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning(
            "Unreadable JSON body",
            extra={"path": request.url.path, "method": request.method},
        )
        return {}
    return payload if isinstance(payload, dict) else {}


def validate_request(
    rules: Sequence[FieldCheck],
) -> Callable[[Request], Awaitable[ValidatedRequest]]:
    """Build the FastAPI dependency enforcing rules on a request."""

    async def dependency(request: Request) -> ValidatedRequest:
        body = await read_json_body(request)
        params = dict(request.path_params)
        errors = run_checks(rules, body=body, params=params)
        if errors:
            raise InputValidationError(errors)
        return ValidatedRequest(body=body, params=params)

    return dependency
