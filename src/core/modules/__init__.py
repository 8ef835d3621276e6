"""Module composition - protocol, loader and endpoint mapper.

Usage:
    from src.core.modules import load_modules, map_module_endpoints
"""

from src.core.modules.loader import (
    ModuleLoadError,
    instantiate_module,
    load_modules,
    map_module_endpoints,
)
from src.core.modules.protocol import Module, RouteSurface

__all__ = [
    "Module",
    "ModuleLoadError",
    "RouteSurface",
    "instantiate_module",
    "load_modules",
    "map_module_endpoints",
]
