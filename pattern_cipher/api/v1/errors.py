from typing import Any

from fastapi.responses import JSONResponse

from pattern_cipher.core.exceptions import CipherError
from pattern_cipher.models.schemas import ErrorResponse


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build a JSON response with the ErrorResponse body."""
    body = ErrorResponse(error=error, message=message, details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump())


def cipher_error_response(status_code: int, exc: CipherError) -> JSONResponse:
    """Build an ErrorResponse from a cipher exception, named by its class."""
    return error_response(status_code, type(exc).__name__, exc.message, exc.details)
