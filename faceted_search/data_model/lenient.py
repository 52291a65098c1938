"""Lenient field types for loosely shaped CMS payloads.

A field annotated with one of these types never fails validation: a value
of the wrong shape reads as the type's neutral default instead.
"""

from typing import Annotated, Any

from pydantic import ValidationError, ValidatorFunctionWrapHandler, WrapValidator


def none_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Validate value, falling back to None when it has the wrong shape."""
    try:
        return handler(value)
    except ValidationError:
        return None


def zero_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Validate a score, falling back to 0.0 when missing or malformed."""
    if value is None:
        return 0.0
    try:
        return handler(value)
    except ValidationError:
        return 0.0


def _non_negative_count(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Validate a facet count; missing, malformed or negative reads as 0."""
    if value is None:
        return 0
    try:
        count: int = handler(value)
    except ValidationError:
        return 0
    return max(count, 0)


OptionalStr = Annotated[str | None, WrapValidator(none_on_error)]
Score = Annotated[float, WrapValidator(zero_on_error)]
Count = Annotated[int, WrapValidator(_non_negative_count)]
