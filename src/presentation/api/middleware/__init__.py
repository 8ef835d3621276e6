"""HTTP middleware."""

from src.presentation.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TRACE_HEADER", "TraceMiddleware", "get_trace_id"]
