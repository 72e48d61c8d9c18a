"""JSON error bodies shared by the collection handlers."""

from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cms_admin.schemas.common import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def error_response(status_code: int, error: str, details: Any = None) -> JSONResponse:
    """Build an ``{error, details?}`` response."""
    body = ErrorResponse(error=error, details=None if details is None else str(details))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a 400 with the field errors as details."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", details)
