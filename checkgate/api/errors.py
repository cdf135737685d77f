"""Structured error response models for consistent API error handling."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from checkgate.core.errors import ConfigurationError


class ErrorResponse(BaseModel):
    """Standardized error response schema."""

    error: bool = True
    code: str
    message: str
    details: dict[str, Any] | None = None


def create_error_response(code: str, message: str, details: dict[str, Any] | None = None) -> ErrorResponse:
    """Create standardized error response."""
    return ErrorResponse(code=code, message=message, details=details)


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Render any ConfigurationError as a 422 ErrorResponse."""
    payload = exc.to_dict()
    response = create_error_response(code=payload["code"], message=payload["message"], details=payload["details"] or None)
    return JSONResponse(status_code=422, content=response.model_dump())
