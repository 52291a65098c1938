"""Top-level shape validation of query responses.

The aggregators tolerate missing fields inside items and facets, but they
need the response envelope itself to be well formed. This check runs
before them and reports every problem at once instead of stopping at the
first, leaving the caller to decide how to fail.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


ITEMS_KEY = "items"
FACETS_KEY = "facets"
TOTAL_KEY = "total"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a response shape check.

    Attributes:
        valid: Whether the response can be aggregated.
        errors: Every problem found, in discovery order.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)

    @property
    def error(self) -> str | None:
        """Primary error for simple error handling."""
        return self.errors[0] if self.errors else None


def validate_response(payload: Any, source: str) -> ValidationResult:
    """Check the envelope of one query response.

    A missing response (None) is valid and reads as empty.

    Args:
        payload: Response data of one content query.
        source: Name of the query, used in messages.

    Returns:
        ValidationResult listing every problem found.
    """
    if payload is None:
        return ValidationResult(valid=True)

    errors: list[str] = []
    if not isinstance(payload, Mapping):
        errors.append(
            f"{source} response is {type(payload).__name__}, expected an object"
        )
        return ValidationResult(valid=False, errors=errors)

    items = payload.get(ITEMS_KEY)
    if items is not None:
        if not isinstance(items, list):
            errors.append(f"{source}.{ITEMS_KEY} is not an array")
        else:
            for index, item in enumerate(items):
                if item is not None and not isinstance(item, Mapping):
                    errors.append(
                        f"{source}.{ITEMS_KEY}[{index}] is "
                        f"{type(item).__name__}, expected an object"
                    )

    facets = payload.get(FACETS_KEY)
    if facets is not None and not isinstance(facets, Mapping):
        errors.append(f"{source}.{FACETS_KEY} is not an object")

    total = payload.get(TOTAL_KEY)
    if total is not None and (isinstance(total, bool) or not isinstance(total, int)):
        errors.append(f"{source}.{TOTAL_KEY} is not an integer")

    return ValidationResult(valid=not errors, errors=errors)
