"""Infrastructure layer - shared adapters.

Adapters implementing the shared domain protocols:
- logging/: structlog-based LoggerProtocol implementation
- events/: in-memory EventBusProtocol implementation
"""
