"""Validation framework for input validation.

This module provides utility functions for common validation patterns and a
declarative ``RuleSet`` that applies them to a command. All validation
functions return Result types for consistent error handling.

Usage:
    from src.core.validation import FieldRule, RuleSet, validate_not_empty

    rules = RuleSet(
        FieldRule(field="name", getter=lambda cmd: cmd.name, check=validate_not_empty),
    )
    match rules.validate(command):
        case Success(value=cmd):
            ...
        case Failure(error=error):
            print(error.message)  # "name cannot be empty"
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

T = TypeVar("T")

# Separator used when several rule violations are reported as one error
MESSAGE_SEPARATOR = "; "

Check = Callable[[Any, str], Result[Any, ValidationError]]


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION,
                message=f"{field_name} cannot be empty",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str, max_length: int, field_name: str
) -> Result[str, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION,
                message=(
                    f"{field_name} must be at most {max_length} characters "
                    f"(got {len(value)})"
                ),
                field=field_name,
            )
        )
    return Success(value=value)


def is_finite_number(value: Decimal | int | float) -> bool:
    """Return False for NaN and infinities."""
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def validate_finite(
    value: Decimal | int | float | None, field_name: str
) -> Result[Decimal | int | float, ValidationError]:
    """Validate that a number is present and finite (not NaN or infinite).

    Args:
        value: Number to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION,
                message=f"{field_name} is required",
                field=field_name,
            )
        )
    if not is_finite_number(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION,
                message=f"{field_name} must be a finite number",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_min_value(
    value: Decimal | int | float | None, minimum: Decimal | int, field_name: str
) -> Result[Decimal | int | float, ValidationError]:
    """Validate a numeric lower bound (inclusive).

    Args:
        value: Number to validate.
        minimum: Smallest accepted value.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    finite = validate_finite(value, field_name)
    if isinstance(finite, Failure):
        return finite
    if value < minimum:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION,
                message=f"{field_name} must be greater than or equal to {minimum}",
                field=field_name,
            )
        )
    return Success(value=value)


def max_length(limit: int) -> Check:
    """Build a ``validate_max_length`` check bound to ``limit``."""

    def check(value: Any, field_name: str) -> Result[Any, ValidationError]:
        return validate_max_length(value, limit, field_name)

    return check


def min_value(minimum: Decimal | int) -> Check:
    """Build a ``validate_min_value`` check bound to ``minimum``."""

    def check(value: Any, field_name: str) -> Result[Any, ValidationError]:
        return validate_min_value(value, minimum, field_name)

    return check


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldRule(Generic[T]):
    """One declared rule: a check applied to a single field of a subject.

    Attributes:
        field: Field name used in error messages.
        getter: Extracts the field value from the subject.
        check: Validation function returning a Result.
        code: Error code reported instead of the check's own code (optional).
    """

    field: str
    getter: Callable[[T], Any]
    check: Check
    code: Enum | None = None


class RuleSet(Generic[T]):
    """Stateless, reusable set of field rules.

    Rules run in declaration order. Once a field fails, its remaining rules
    are skipped; other fields are still checked so that every problem is
    reported at once. Instances hold no mutable state and are meant to be
    built once at import time and shared.
    """

    def __init__(self, *rules: FieldRule[T]) -> None:
        self._rules: tuple[FieldRule[T], ...] = rules

    @property
    def rules(self) -> tuple[FieldRule[T], ...]:
        return self._rules

    def errors(self, subject: T) -> list[ValidationError]:
        """Return every rule violation for ``subject`` (empty when valid)."""
        failed_fields: set[str] = set()
        errors: list[ValidationError] = []
        for rule in self._rules:
            if rule.field in failed_fields:
                continue
            result = rule.check(rule.getter(subject), rule.field)
            if isinstance(result, Failure):
                failed_fields.add(rule.field)
                error = result.error
                if rule.code is not None:
                    error = replace(error, code=rule.code)
                errors.append(error)
        return errors

    def validate(self, subject: T) -> Result[T, ValidationError]:
        """Validate ``subject`` against all rules.

        Returns:
            Success(subject) when every rule passes, otherwise a single
            Failure whose message joins all violation messages with
            ``"; "``. The code is ``validation`` unless every violation
            carries the same rule-specific code.
        """
        errors = self.errors(subject)
        if not errors:
            return Success(value=subject)

        codes = {error.code for error in errors}
        code = codes.pop() if len(codes) == 1 else ErrorCode.VALIDATION
        fields = [error.field for error in errors if error.field]
        return Failure(
            error=ValidationError(
                code=code,
                message=MESSAGE_SEPARATOR.join(error.message for error in errors),
                field=fields[0] if len(set(fields)) == 1 else None,
                details={"fields": ",".join(fields)} if fields else None,
            )
        )
