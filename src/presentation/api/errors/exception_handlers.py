"""Global exception handlers for the FastAPI application.

Catch exceptions that escape route handlers and convert them to RFC 7807
Problem Details responses. Expected failures never reach these handlers;
they are returned as Result values and mapped by ErrorResponseBuilder.

Handlers:
    http_exception_handler: Converts HTTPException (404 routes, 405, ...)
    validation_exception_handler: Converts RequestValidationError (schema failures)
    generic_exception_handler: Catches all unhandled exceptions (no stack trace leaks)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from src.presentation.api.middleware.trace_middleware import TRACE_HEADER, get_trace_id

UNPROCESSABLE_STATUS = 422

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _trace_id(request: Request) -> str | None:
    # request.state survives after TraceMiddleware has reset its contextvar
    return getattr(request.state, "trace_id", None) or get_trace_id()


def _base_url(request: Request) -> str:
    return getattr(request.app.state, "settings", settings).api_base_url


def _get_status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to a Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing or a dependency.

    Returns:
        JSONResponse with ProblemDetails.
    """
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _get_status_info(exc.status_code)
    problem = ProblemDetails(
        type=f"{_base_url(request)}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to Problem Details with field errors.

    Raised by FastAPI when a request body or path parameter does not match
    its schema (e.g. ``price`` is not a number, ``id`` is not a UUID).
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "price"] -> "price"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "path", "query")]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{_base_url(request)}/errors/validation-failed",
        title="Validation Failed",
        status=UNPROCESSABLE_STATUS,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=UNPROCESSABLE_STATUS,
        content=problem.model_dump(exclude_none=True),
    )


def build_generic_exception_handler(logger: LoggerProtocol):
    """Build the catch-all handler logging through ``logger``.

    The client receives a 500 Problem Details body with the trace ID only,
    never the exception text or stack trace.
    """

    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        trace_id = _trace_id(request)
        logger.error(
            "unhandled_exception",
            error=exc,
            trace_id=trace_id,
            request_path=request.url.path,
            request_method=request.method,
        )

        problem = ProblemDetails(
            type=f"{_base_url(request)}/errors/internal-server-error",
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please contact support with the trace ID.",
            instance=str(request.url.path),
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=problem.model_dump(exclude_none=True),
            headers={TRACE_HEADER: trace_id} if trace_id else None,
        )

    return generic_exception_handler


def register_exception_handlers(app: FastAPI, logger: LoggerProtocol) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Logger used for unhandled exceptions
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, build_generic_exception_handler(logger))
