"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response: every AppException renders as this."""

    error_code: str
    message: str
    details: Any | None = None


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error envelope."""
    descriptions = {
        403: "Caller is not the author",
        404: "Resource not found",
        409: "Conflicting state",
        422: "Validation failed",
    }
    return {
        code: {"model": ErrorResponse, "description": descriptions.get(code, "Error")}
        for code in status_codes
    }
