"""Module loader and endpoint mapper.

Two startup-only operations compose the host:

- ``load_modules``: instantiate every module class of an explicit,
  build-time registry (no runtime type scanning), let each one register its
  services, and return the instances in registration order.
- ``map_module_endpoints``: ask each loaded module, in the same order, to
  attach its routes to the shared routing surface.

Failures here are configuration errors: they raise ``ModuleLoadError`` and
abort startup. There are no retries.

Usage:
    modules = load_modules(MODULE_REGISTRY, services, settings, logger=logger)
    map_module_endpoints(app, modules, logger=logger)
"""

import inspect
from collections.abc import Sequence

from src.core.config import Settings
from src.core.container.services import ServiceRegistry
from src.core.modules.protocol import Module, RouteSurface
from src.domain.protocols.logger_protocol import LoggerProtocol


class ModuleLoadError(Exception):
    """Startup-fatal failure while loading or registering a module.

    Attributes:
        module_type: Class that failed to load.
    """

    def __init__(self, module_type: type, reason: str) -> None:
        super().__init__(f"Cannot load module {module_type.__qualname__}: {reason}")
        self.module_type = module_type
        self.reason = reason


def instantiate_module(module_type: type) -> Module:
    """Create a module through its zero-argument constructor.

    Args:
        module_type: Concrete class implementing the Module protocol.

    Returns:
        The new module instance.

    Raises:
        ModuleLoadError: If the class is abstract, needs constructor
            arguments, fails to construct, or does not satisfy Module.
    """
    if not inspect.isclass(module_type):
        raise ModuleLoadError(type(module_type), "registry entry is not a class")
    if inspect.isabstract(module_type):
        raise ModuleLoadError(module_type, "class is abstract")

    try:
        inspect.signature(module_type).bind()
    except TypeError:
        raise ModuleLoadError(
            module_type, "a public zero-argument constructor is required"
        ) from None
    except ValueError:
        # Builtin signatures cannot be introspected; let construction decide.
        pass

    try:
        module = module_type()
    except Exception as e:
        raise ModuleLoadError(module_type, f"constructor failed: {e}") from e

    if not isinstance(module, Module):
        raise ModuleLoadError(module_type, "class does not implement the Module protocol")
    return module


def load_modules(
    module_types: Sequence[type],
    services: ServiceRegistry,
    settings: Settings,
    *,
    logger: LoggerProtocol,
) -> tuple[Module, ...]:
    """Instantiate and register every module, in registry order.

    Args:
        module_types: Explicit, ordered registry of module classes.
        services: Shared service-registration context (mutated once per module).
        settings: Application configuration handed to each module.
        logger: Startup logger.

    Returns:
        Loaded modules, in the order they were registered.

    Raises:
        ModuleLoadError: On any instantiation or registration failure, or
            when two modules share a name.
    """
    modules: list[Module] = []
    names: set[str] = set()

    for index, module_type in enumerate(module_types):
        module = instantiate_module(module_type)

        if module.name in names:
            raise ModuleLoadError(module_type, f"duplicate module name '{module.name}'")

        try:
            module.register_services(services, settings)
        except Exception as e:
            logger.critical(
                "module_registration_failed", error=e, module=module.name, index=index
            )
            raise ModuleLoadError(module_type, f"service registration failed: {e}") from e

        names.add(module.name)
        modules.append(module)
        logger.info("module_loaded", module=module.name, index=index)

    logger.info("modules_loaded", count=len(modules), modules=[m.name for m in modules])
    return tuple(modules)


def map_module_endpoints(
    router: RouteSurface,
    modules: Sequence[Module],
    *,
    logger: LoggerProtocol,
) -> None:
    """Attach each module's routes to ``router``, in registration order.

    Not idempotent: calling twice on the same surface registers every route
    twice. The host calls it exactly once.
    """
    for module in modules:
        module.map_endpoints(router)
        logger.info("module_endpoints_mapped", module=module.name)
