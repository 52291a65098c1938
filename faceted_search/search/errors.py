"""Error types for the search service."""

from enum import Enum


class ErrorCode(str, Enum):
    """Classification of search service errors.

    - PAYLOAD_SHAPE: A query response does not have the expected top-level shape
    """

    PAYLOAD_SHAPE = "PAYLOAD_SHAPE"


class FacetedSearchError(Exception):
    """Base exception for search service errors.

    Provides structured error information for logging and API responses.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        source: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize the search error.

        Args:
            code: Classification of the error.
            message: Human-readable error message.
            source: Name of the query response at fault.
            errors: Every problem found, for detailed logging.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.source = source
        self.errors = errors or [message]

    def to_dict(self) -> dict[str, str | list[str] | None]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "source": self.source,
            "errors": list(self.errors),
        }


class PayloadShapeError(FacetedSearchError):
    """Raised when a query response cannot be handed to the aggregators."""

    def __init__(self, source: str, errors: list[str]) -> None:
        """Initialize the payload shape error.

        Args:
            source: Name of the query response at fault.
            errors: Every shape problem found in the response.
        """
        primary = errors[0] if errors else "unknown payload problem"
        super().__init__(
            ErrorCode.PAYLOAD_SHAPE,
            f"Invalid {source} response: {primary}",
            source=source,
            errors=errors,
        )
