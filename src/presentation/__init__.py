"""Presentation layer - HTTP concerns shared by every module.

Structure:
- api/errors/: RFC 7807 problem details, error mapping, global handlers
- api/middleware/: request tracing
- api/routes/: declarative route registries and their generator
- api/dependencies.py: service registry access for route handlers

Module endpoints live inside each module (src/modules/<name>/api). The
presentation layer contains NO business logic.
"""
