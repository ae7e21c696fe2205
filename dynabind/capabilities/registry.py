from __future__ import annotations

"""Service registry.

The registry maps a capability identifier to the instance that implements it.
Identifiers are usually the Protocol class describing the capability (for
example ``RestApiService``); plain string tags are accepted too.

Commands look capabilities up through this registry at execution time. The
registry is populated by the host at startup and is read-only from the
commands' point of view, so one instance can be shared by concurrently running
commands.
"""

from typing import Any, Dict, Hashable, Optional, Type, TypeVar, Union, overload

from dynabind.core.logging_config import get_logger
from dynabind.errors import CapabilityNotFoundError

logger = get_logger(__name__)

T = TypeVar("T")

CapabilityId = Union[type, str]


class ServiceRegistry:
    """
    In-memory mapping of capability identifiers to implementations.

    Notes:
        - ``register`` overwrites any existing mapping for the identifier.
        - ``resolve`` returns None if the capability is missing.
        - ``get`` raises ``CapabilityNotFoundError`` if the capability is missing.
    """

    def __init__(self, services: Optional[Dict[Hashable, Any]] = None) -> None:
        """Initialize the registry, optionally seeded with ``services``."""
        self._services: Dict[Hashable, Any] = dict(services or {})

    def register(self, capability_id: CapabilityId, instance: Any) -> "ServiceRegistry":
        """
        Register a capability implementation.

        Args:
            capability_id: The identifier commands will resolve the capability by.
            instance: The implementation.

        Returns:
            The registry itself, so registrations can be chained.
        """
        self._services[capability_id] = instance
        logger.debug("ServiceRegistry.register: %s -> %s", _name_of(capability_id), type(instance).__name__)
        return self

    def unregister(self, capability_id: CapabilityId) -> None:
        self._services.pop(capability_id, None)

    @overload
    def resolve(self, capability_id: Type[T]) -> Optional[T]: ...

    @overload
    def resolve(self, capability_id: str) -> Optional[Any]: ...

    def resolve(self, capability_id: CapabilityId) -> Optional[Any]:
        """
        Look up a capability.

        Args:
            capability_id: The identifier the capability was registered under.

        Returns:
            The implementation, or None if nothing is registered.
        """
        instance = self._services.get(capability_id)
        logger.debug("ServiceRegistry.resolve: %s found=%s", _name_of(capability_id), instance is not None)
        return instance

    @overload
    def get(self, capability_id: Type[T]) -> T: ...

    @overload
    def get(self, capability_id: str) -> Any: ...

    def get(self, capability_id: CapabilityId) -> Any:
        """
        Retrieve a registered capability.

        Raises:
            CapabilityNotFoundError: If no capability is registered with the given identifier.
        """
        instance = self.resolve(capability_id)
        if instance is None:
            raise CapabilityNotFoundError(capability_id)
        return instance

    def has(self, capability_id: CapabilityId) -> bool:
        """Check if a capability is registered."""
        return capability_id in self._services


def _name_of(capability_id: Any) -> str:
    return capability_id.__name__ if isinstance(capability_id, type) else str(capability_id)
