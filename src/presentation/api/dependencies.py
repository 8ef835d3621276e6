"""FastAPI dependencies backed by the service registry.

Route handlers never build their collaborators. They declare a dependency
on a registry key and the host's ServiceRegistry (``app.state.services``)
resolves it per request.

Usage:
    async def create_product(
        handler: CreateProductHandler = Depends(provide(CreateProductHandler)),
    ) -> ...
"""

from collections.abc import Callable
from typing import TypeVar

from fastapi import Request

from src.core.container.services import ServiceRegistry

T = TypeVar("T")


def get_services(request: Request) -> ServiceRegistry:
    """Return the service registry of the application serving ``request``."""
    return request.app.state.services


def provide(key: type[T]) -> Callable[[Request], T]:
    """Build a FastAPI dependency resolving ``key`` from the service registry.

    Args:
        key: Registry key (usually a handler class or a protocol).

    Returns:
        Dependency callable for ``Depends``.
    """

    def dependency(request: Request) -> T:
        return get_services(request).resolve(key)

    dependency.__name__ = f"provide_{getattr(key, '__name__', 'service')}"
    return dependency
