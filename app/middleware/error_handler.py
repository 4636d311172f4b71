import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.exceptions import BookstoreError, Internal

logger = logging.getLogger(__name__)

AVAILABLE_ROUTES = {
    "auth": ["/auth/register", "/auth/login"],
    "products": [
        "/collection/Products",
        "/collection/Products/search",
        "/collection/Products/{id}",
    ],
    "cart": ["/cart/add"],
    "chatbot": ["/chatbot/respond"],
    "admin": ["/admin/stats"],
}


def error_response(status_code: int, message: str, code: str, **extra) -> JSONResponse:
    content = {"message": message, "code": code}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def validation_message(exc: RequestValidationError) -> str:
    """First validation failure as a single human-readable sentence."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)

    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if first.get("type") in ("json_invalid", "model_attributes_type", "dict_type"):
        return "Request body must be a JSON object"
    if not loc:
        return "Request body is required"
    return f"{'.'.join(loc)}: {first.get('msg', 'invalid value')}"


def setup_exception_handlers(app: FastAPI, settings: Settings):
    """Register exception handlers with FastAPI app."""

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError):
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        response = error_response(exc.status_code, exc.message, exc.code)
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = validation_message(exc)
        logger.warning(f"Validation error on {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message, "INVALID_INPUT")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(
                status.HTTP_404_NOT_FOUND,
                "Route not found",
                "ROUTE_NOT_FOUND",
                availableRoutes=AVAILABLE_ROUTES,
            )
        return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}"
        )
        err = Internal()
        detail = "Something went wrong" if settings.is_production else str(exc)
        return error_response(err.status_code, err.message, err.code, error=detail)
