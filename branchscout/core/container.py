"""
Service container for branchscout.

Holds one dependency-injector provider per interface type. bootstrap()
fills it with the logger, the git interactors and the services built on
them; the domain model itself never reads it.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """
    Interface-keyed registry of dependency-injector providers.

    Registrations are shared objects: a ready-made instance is wrapped in
    providers.Object, a factory in providers.Singleton (built on first
    resolve, then cached).
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the process-wide container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide container and everything registered in it."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a service resolved to one shared object.

        Args:
            interface: Type the service is resolved by
            implementation: Ready-made instance
            factory: Zero-argument callable, invoked lazily on first resolve
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")
        self._providers[interface] = provider

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by the type it was registered under.

        Raises:
            KeyError: If nothing is registered for interface
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for {interface.__name__}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, or None if nothing is registered for it."""
        provider = self._providers.get(interface)
        return provider() if provider is not None else None

    @contextmanager
    def override(self, interface: type[T], instance: T) -> Iterator[None]:
        """
        Resolve interface to instance for the duration of the block.

        Goes through the provider's own override stack, so the original
        registration (and any singleton it already built) comes back on exit.

        Raises:
            KeyError: If nothing is registered for interface
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for {interface.__name__}")
        with provider.override(providers.Object(instance)):
            yield


def get_container() -> ServiceContainer:
    """Get the process-wide service container."""
    return ServiceContainer.get_instance()
