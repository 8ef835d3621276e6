"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the host and its modules while
remaining backend-agnostic. Every call is a snake_case event name plus
key-value context; never pass secrets or raw request bodies.

Context Binding:
    Use bind() or with_context() to create scoped loggers with permanent
    context (module, trace_id) automatically included in all logs.

Usage:
    from src.core.container import build_logger

    logger = build_logger(settings)
    logger.info("module_loaded", module="Catalog", index=0)

    module_logger = logger.bind(module="Catalog")
    module_logger.warning("product_create_rejected", code="validation")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard log levels and context binding for
    request- or module-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (startup aborts, unrecoverable errors)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
