"""Error response builder for RFC 7807 Problem Details.

Converts DomainError values returned by module handlers into HTTP responses.

Mapping:
    NotFoundError  → 404 ProblemDetails
    ConflictError  → 409 ProblemDetails
    anything else  → 400 ValidationProblemDetails (validation and domain rule
                     violations share the same client-error class)

Exports:
    ErrorResponseBuilder: Utility class for building problem responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.presentation.api.errors.problem_details import (
    ProblemDetails,
    ValidationProblemDetails,
)
from src.presentation.api.middleware.trace_middleware import get_trace_id


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses from domain errors.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to a problem-details JSON response.

        Args:
            error: Error returned by a handler.
            request: FastAPI Request (for the instance path).

        Returns:
            JSONResponse with the appropriate status code.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        trace_id = get_trace_id()
        base_url = getattr(request.app.state, "settings", settings).api_base_url
        problem_type = f"{base_url}/errors/{error.code_value}"

        if status_code == status.HTTP_400_BAD_REQUEST:
            problem: ProblemDetails | ValidationProblemDetails = ValidationProblemDetails(
                type=problem_type,
                status=status_code,
                detail=error.message,
                instance=str(request.url.path),
                errors={error.code_value: [error.message]},
                trace_id=trace_id,
            )
        else:
            problem = ProblemDetails(
                type=problem_type,
                title=ErrorResponseBuilder._get_title(status_code),
                status=status_code,
                detail=error.message,
                instance=str(request.url.path),
                trace_id=trace_id,
            )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a domain error to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(not_found_error)
            404
        """
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        if isinstance(error, ConflictError):
            return status.HTTP_409_CONFLICT
        return status.HTTP_400_BAD_REQUEST

    @staticmethod
    def _get_title(status_code: int) -> str:
        mapping = {
            status.HTTP_404_NOT_FOUND: "Resource Not Found",
            status.HTTP_409_CONFLICT: "Resource Conflict",
        }
        return mapping.get(status_code, "Bad Request")
