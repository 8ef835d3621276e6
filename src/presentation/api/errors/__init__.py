"""Error responses (RFC 7807 Problem Details).

Exports:
    ErrorDetail, ProblemDetails, ValidationProblemDetails: response schemas
    ErrorResponseBuilder: DomainError → JSONResponse
    register_exception_handlers: global exception handlers
"""

from src.presentation.api.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.api.errors.exception_handlers import register_exception_handlers
from src.presentation.api.errors.problem_details import (
    VALIDATION_PROBLEM_TITLE,
    ErrorDetail,
    ProblemDetails,
    ValidationProblemDetails,
)

__all__ = [
    "VALIDATION_PROBLEM_TITLE",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "ValidationProblemDetails",
    "register_exception_handlers",
]
