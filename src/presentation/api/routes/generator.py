"""Route generator for module route registries.

Converts declarative RouteMetadata entries into FastAPI routes at startup.

Usage:
    router = APIRouter(prefix="/v1/catalog")
    register_routes_from_registry(router, CATALOG_ROUTES)
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.api.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            deprecated=metadata.deprecated,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Product not found")])
        {404: {"description": "Product not found"}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        response: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            response["model"] = error.model
        responses[error.status] = response
    return responses
