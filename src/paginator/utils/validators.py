"""Request validation utilities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paginator.models.errors import InvalidPageRequestError


class PageRequest(BaseModel):
    """
    Validation model for page query parameters.

    Values usually arrive as query-string text ("3"), so parsing is lax.
    Zero means "not supplied" for both fields and is resolved later by
    the Chapter defaults. A negative page is accepted and clamped there too.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    page: int = Field(
        default=0,
        description="Requested page number (1-based, 0 or negative = not supplied)",
    )
    page_size: int = Field(
        default=0,
        ge=0,
        description="Results per page (0 = default page size)",
    )


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "query"
        raw_msg = err.get("msg", "Invalid value")

        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "greater than or equal" in msg_lower:
            msg = "Must be zero or a positive integer"
        elif "valid integer" in msg_lower:
            msg = "Must be an integer"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def parse_page_request(params: dict[str, Any] | None) -> PageRequest:
    """Validate raw query parameters into a PageRequest.

    Unknown parameters are ignored so callers can pass the whole
    query-string mapping.

    Raises:
        InvalidPageRequestError: with sanitized field errors in `details`
    """
    try:
        return PageRequest(**(params or {}))
    except ValidationError as exc:
        raise InvalidPageRequestError(
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc
