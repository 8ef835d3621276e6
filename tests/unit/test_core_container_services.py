"""Unit tests for ServiceRegistry.

Tests cover:
- Singleton lifetime (lazy, cached)
- Transient lifetime (new instance per resolve)
- Pre-built instances
- Duplicate registration and missing service errors
- Factories resolving other services
"""

from unittest.mock import MagicMock

import pytest

from src.core.container import (
    ServiceAlreadyRegisteredError,
    ServiceLifetime,
    ServiceNotRegisteredError,
    ServiceRegistrationError,
    ServiceRegistry,
)


class _Repository:
    pass


class _Handler:
    def __init__(self, repository: _Repository) -> None:
        self.repository = repository


@pytest.mark.unit
class TestServiceRegistryLifetimes:
    """Test service lifetimes."""

    def test_singleton_built_lazily_once(self):
        factory = MagicMock(side_effect=lambda _: _Repository())
        services = ServiceRegistry()
        services.add_singleton(_Repository, factory)

        factory.assert_not_called()
        first = services.resolve(_Repository)
        second = services.resolve(_Repository)

        assert first is second
        factory.assert_called_once_with(services)
        assert services.lifetime_of(_Repository) is ServiceLifetime.SINGLETON

    def test_transient_built_per_resolve(self):
        services = ServiceRegistry()
        services.add_singleton(_Repository, lambda _: _Repository())
        services.add_transient(_Handler, lambda s: _Handler(s.resolve(_Repository)))

        first = services.resolve(_Handler)
        second = services.resolve(_Handler)

        assert first is not second
        assert first.repository is second.repository
        assert services.lifetime_of(_Handler) is ServiceLifetime.TRANSIENT

    def test_instance_returned_as_is(self):
        repository = _Repository()
        services = ServiceRegistry()
        services.add_instance(_Repository, repository)

        assert services.resolve(_Repository) is repository


@pytest.mark.unit
class TestServiceRegistryErrors:
    """Test registration failures."""

    def test_duplicate_registration_rejected(self):
        services = ServiceRegistry()
        services.add_singleton(_Repository, lambda _: _Repository())

        with pytest.raises(ServiceAlreadyRegisteredError) as exc_info:
            services.add_transient(_Repository, lambda _: _Repository())

        assert "_Repository" in str(exc_info.value)
        assert exc_info.value.key is _Repository

    def test_missing_service_raises(self):
        services = ServiceRegistry()

        with pytest.raises(ServiceNotRegisteredError):
            services.resolve(_Handler)

    def test_missing_service_is_lookup_error(self):
        assert issubclass(ServiceNotRegisteredError, LookupError)
        assert issubclass(ServiceNotRegisteredError, ServiceRegistrationError)

    def test_membership_and_size(self):
        services = ServiceRegistry()
        services.add_instance(_Repository, _Repository())

        assert _Repository in services
        assert services.is_registered(_Handler) is False
        assert len(services) == 1
