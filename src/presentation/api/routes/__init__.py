"""Declarative route registries."""

from src.presentation.api.routes.generator import register_routes_from_registry
from src.presentation.api.routes.metadata import ErrorSpec, HTTPMethod, RouteMetadata

__all__ = [
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
    "register_routes_from_registry",
]
