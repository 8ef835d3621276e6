"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for ALL expected failures (validation,
business rule violations, missing resources). Domain errors flow through
the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- ``code`` is any Enum member so modules can own their error codes

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    error = DomainError(code=ErrorCode.VALIDATION, message="name cannot be empty")
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum member).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: Enum
    message: str
    details: dict[str, str] | None = None

    @property
    def code_value(self) -> str:
        """Wire representation of the error code."""
        return str(self.code.value)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code_value}: {self.message}"
