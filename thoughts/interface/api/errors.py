"""Exception handlers mapping errors onto response envelopes."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from thoughts.domain.error import DomainError, NotFoundError, ValidationError
from thoughts.interface.api.envelope import error_response
from thoughts.interface.error import ApiError


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.info("Request rejected by validation", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Unhandled domain error", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies (e.g. not JSON, wrong field types) are 400s."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request."
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def http_exception_handler(api_prefix: str):
    """Build the handler for routing and HTTPException errors.

    Under api_prefix, an unmatched path or method is a 404 naming the
    endpoint. Elsewhere the status and detail pass through unchanged.
    """
    unmatched = (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)

    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        path = request.url.path
        under_api = path == api_prefix or path.startswith(f"{api_prefix}/")
        routing_error = exc.detail in ("Not Found", "Method Not Allowed")
        if under_api and routing_error and exc.status_code in unmatched:
            return error_response(
                status.HTTP_404_NOT_FOUND,
                f"The API endpoint {request.method} {path} was not found on this server.",
            )
        return error_response(exc.status_code, str(exc.detail))

    return handle_http_exception


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unexpected error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected internal server error occurred.",
    )


def register_error_handlers(app: FastAPI, api_prefix: str = "/api") -> None:
    """Register all envelope-producing exception handlers on the app."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler(api_prefix))
    app.add_exception_handler(Exception, handle_unexpected)
