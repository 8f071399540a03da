"""
Application exception handlers.

Maps hookstorm exceptions to HTTP responses using the status table in
core.exceptions.http_mapping, so routers can let domain errors propagate.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import HookstormError, get_http_status_code

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """Default error response body."""
    return {
        "success": False,
        "message": message,
        "errors": errors or [],
    }


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register exception handlers for the application.
    
    Args:
        app: FastAPI application instance
        is_production: Hide unexpected error details when True
    """
    @app.exception_handler(HookstormError)
    async def hookstorm_error_handler(request: Request, exc: HookstormError):
        """Handle domain exceptions."""
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=error_response(message=exc.message, errors=[exc.to_dict()])
        )
    
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies and parameters."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response(
                message="Invalid request",
                errors=[
                    {
                        "code": error.get("type", "validation_error"),
                        "message": error.get("msg", ""),
                        "details": {"loc": list(error.get("loc", ()))},
                    }
                    for error in exc.errors()
                ]
            )
        )
    
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        
        if is_production:
            message = "An unexpected error occurred"
        else:
            message = str(exc)
        
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(message=message)
        )
