"""RFC 7807 Problem Details for HTTP APIs.

This module implements RFC 7807 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
    ValidationProblemDetails: Problem details with an error code → messages map
"""

from pydantic import BaseModel, Field

VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."


class ErrorDetail(BaseModel):
    """Individual field-specific error (request schema failures).

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (request validation)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/product.not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Product '0190...' does not exist",
        ...     instance="/v1/catalog/products/0190...",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/not-found"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/v1/catalog/products"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )


class ValidationProblemDetails(BaseModel):
    """Validation problem: error code → list of human-readable messages.

    Returned when a command is rejected by validation or by a domain rule.

    Examples:
        >>> ValidationProblemDetails(
        ...     type="http://localhost:8000/errors/validation",
        ...     status=400,
        ...     detail="name cannot be empty",
        ...     instance="/v1/catalog/products",
        ...     errors={"validation": ["name cannot be empty"]},
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(VALIDATION_PROBLEM_TITLE, description="Short summary")
    status: int = Field(400, description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    errors: dict[str, list[str]] = Field(
        ...,
        description="Error code → messages",
        examples=[{"product.price.negative": ["Price must be >= 0"]}],
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
