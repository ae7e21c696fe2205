"""Error types for the dynabind command pipeline.

Defines the exceptions raised while executing commands. There are two
distinct failure channels:

- An exception means the command could not run at all (a capability is
  missing from the registry, or a property path cannot be resolved).
- A ``CommandResult`` with ``succeeded=False`` means the command ran but the
  remote side rejected the operation.
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from dynabind.commands.base import CommandResult


def _type_name(obj: Any) -> str:
    if isinstance(obj, type):
        return obj.__name__
    return str(obj)


class DynabindError(Exception):
    """Base error for all dynabind exceptions."""


class CapabilityNotFoundError(DynabindError):
    """Raised when the service registry has no entry for a required capability."""

    def __init__(self, capability_id: Any) -> None:
        super().__init__(f"Unable to locate the capability '{_type_name(capability_id)}'")
        self.capability_id = capability_id


class PropertyResolutionError(DynabindError):
    """Raised when a property path cannot be read from or written to a context object.

    Args:
        target_type: Type of the object the segment was resolved against.
        property_name: The path segment (or full path) that failed.
        message: Optional override of the default message.
    """

    def __init__(self, target_type: Optional[type], property_name: str, message: Optional[str] = None) -> None:
        type_name = target_type.__name__ if target_type is not None else "None"
        super().__init__(message or f"Cannot resolve property '{property_name}' on data type {type_name}")
        self.target_type = target_type
        self.property_name = property_name


class PropertyNotFoundError(PropertyResolutionError):
    """Raised when a path segment does not exist on the target's current shape."""

    def __init__(self, target_type: Optional[type], property_name: str) -> None:
        type_name = target_type.__name__ if target_type is not None else "None"
        super().__init__(
            target_type,
            property_name,
            f"Property name '{property_name}' does not exist on data type {type_name}",
        )


class ResponseContentError(DynabindError):
    """Raised when a successful response carries a body that cannot be parsed.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code of the response.
        details: The raw response text.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class CommandExecuteError(DynabindError):
    """Raised by callers that want a failed ``CommandResult`` as an exception."""

    def __init__(self, result: "CommandResult", message_prefix: str = "") -> None:
        if message_prefix:
            message = f"{message_prefix} - {result.diagnostic}"
        else:
            message = f"Command failed due to the following error - {result.diagnostic}"
        super().__init__(message)
        self.result = result
        self.message_prefix = message_prefix


class ConditionEvalError(DynabindError):
    """Raised when a condition cannot compare the values it resolved."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Condition evaluation failed due to the following error - {message}")
