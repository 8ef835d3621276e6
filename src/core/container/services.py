"""Service registry - the service-registration context modules write into.

The host creates one ServiceRegistry during startup. Shared infrastructure
(logger, event bus) is registered first, then every module registers its own
repositories and handlers. Request handlers resolve their dependencies from
the registry through ``src.presentation.api.dependencies.provide``.

Lifetimes:
- singleton: built lazily on first resolve, then cached for the process lifetime
- transient: built on every resolve (e.g. command handlers)
- instance: an already-built object

The registry is written only during single-threaded startup, before any
request is served, so it carries no locking.

Usage:
    services = ServiceRegistry()
    services.add_singleton(ProductRepository, lambda _: InMemoryProductRepository())
    services.add_transient(
        CreateProductHandler,
        lambda s: CreateProductHandler(repository=s.resolve(ProductRepository), ...),
    )

    handler = services.resolve(CreateProductHandler)
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, cast

T = TypeVar("T")

ServiceFactory = Callable[["ServiceRegistry"], Any]


class ServiceLifetime(str, Enum):
    """How long a resolved service instance lives."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ServiceRegistrationError(Exception):
    """Base class for startup-fatal service registration errors."""


class ServiceNotRegisteredError(ServiceRegistrationError, LookupError):
    """Raised when resolving a key nobody registered."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Service not registered: {_key_name(key)}")
        self.key = key


class ServiceAlreadyRegisteredError(ServiceRegistrationError):
    """Raised when two registrations claim the same key."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Service already registered: {_key_name(key)}")
        self.key = key


@dataclass(slots=True, kw_only=True)
class _Registration:
    factory: ServiceFactory
    lifetime: ServiceLifetime
    instance: Any = None
    built: bool = False


def _key_name(key: object) -> str:
    return getattr(key, "__qualname__", None) or repr(key)


class ServiceRegistry:
    """Minimal service-registration context shared by the host and modules."""

    def __init__(self) -> None:
        self._registrations: dict[object, _Registration] = {}

    def add_singleton(self, key: type[T] | object, factory: ServiceFactory) -> None:
        """Register a lazily built, cached service."""
        self._register(key, _Registration(factory=factory, lifetime=ServiceLifetime.SINGLETON))

    def add_transient(self, key: type[T] | object, factory: ServiceFactory) -> None:
        """Register a service built anew on every resolve."""
        self._register(key, _Registration(factory=factory, lifetime=ServiceLifetime.TRANSIENT))

    def add_instance(self, key: type[T] | object, instance: Any) -> None:
        """Register an already-built singleton instance."""
        self._register(
            key,
            _Registration(
                factory=lambda _: instance,
                lifetime=ServiceLifetime.SINGLETON,
                instance=instance,
                built=True,
            ),
        )

    def is_registered(self, key: object) -> bool:
        return key in self._registrations

    def lifetime_of(self, key: object) -> ServiceLifetime:
        """Return the lifetime ``key`` was registered with.

        Raises:
            ServiceNotRegisteredError: If ``key`` is unknown.
        """
        return self._lookup(key).lifetime

    def resolve(self, key: type[T]) -> T:
        """Return the service registered under ``key``.

        Raises:
            ServiceNotRegisteredError: If ``key`` is unknown.
        """
        registration = self._lookup(key)
        if registration.lifetime is ServiceLifetime.TRANSIENT:
            return cast(T, registration.factory(self))
        if not registration.built:
            registration.instance = registration.factory(self)
            registration.built = True
        return cast(T, registration.instance)

    def __contains__(self, key: object) -> bool:
        return self.is_registered(key)

    def __len__(self) -> int:
        return len(self._registrations)

    def _register(self, key: object, registration: _Registration) -> None:
        if key in self._registrations:
            raise ServiceAlreadyRegisteredError(key)
        self._registrations[key] = registration

    def _lookup(self, key: object) -> _Registration:
        try:
            return self._registrations[key]
        except KeyError:
            raise ServiceNotRegisteredError(key) from None
