"""Core shared kernel.

This module provides foundational utilities used across all modules:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Validation framework for input validation
- Module composition (registry, loader, endpoint mapper)

The core module has NO dependencies on individual modules.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, InvalidResultAccessError, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "InvalidResultAccessError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
