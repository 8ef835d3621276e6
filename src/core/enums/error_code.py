"""Core error codes (machine-readable).

Codes shared by every module. Module-specific codes live with the module
(e.g. ``ProductErrorCode`` in the catalog domain) and follow the dotted
``entity.field.reason`` naming convention.

Categories:
- Validation errors (VALIDATION)
- Resource errors (RESOURCE_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Core error codes shared across modules."""

    # Validation errors
    VALIDATION = "validation"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource.not_found"
