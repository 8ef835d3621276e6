"""Pluggable feature modules."""

from src.modules.registry import MODULE_REGISTRY

__all__ = ["MODULE_REGISTRY"]
