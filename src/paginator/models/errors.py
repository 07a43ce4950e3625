"""Custom exception classes for the paginator."""

from typing import Any

from paginator.utils.constants import (
    ERROR_CODE_MISSING_BASE_URL,
    ERROR_CODE_MISSING_TOTAL_RESULTS,
    ERROR_CODE_VALIDATION_FAILED,
)


class PaginationError(Exception):
    """
    Base exception for all pagination errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.

    The error code is the tag callers should branch on; the message is
    for humans only.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class MissingTotalResultsError(PaginationError):
    """Raised when the last page is computed without a total result count."""

    def __init__(
        self,
        *,
        message: str = "TotalResults value is missing",
        error_code: str = ERROR_CODE_MISSING_TOTAL_RESULTS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MissingBaseURLError(PaginationError):
    """Raised when links are rendered without a base URL."""

    def __init__(
        self,
        *,
        message: str = "BaseURL value is missing",
        error_code: str = ERROR_CODE_MISSING_BASE_URL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidPageRequestError(PaginationError):
    """Raised when page request parameters fail validation."""

    def __init__(
        self,
        *,
        message: str = "Invalid page request parameters",
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
