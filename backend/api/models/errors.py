"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from fastapi.responses import JSONResponse


class ErrorResponse(BaseModel):
    """
    Error body of the billing and favorite endpoints.

    The SPA reads `error` (or `context.error` through its function
    client), so nothing else goes in here.
    """

    error: str


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Build an `{"error": message}` JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )
