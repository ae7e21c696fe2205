from __future__ import annotations

"""Command contract and execution result models.

A command is a unit of work configured declaratively through its fields and
executed against:

- a ``ServiceRegistry`` providing the capabilities it needs,
- a context object it reads inputs from and writes outputs to.

Commands do not keep state across executions. A command may construct and
execute another command as part of its own execution, passing through the same
registry and context, and awaiting it before continuing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.errors import CommandExecuteError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command execution.

    Attributes
    ----------
    succeeded:
        Whether the operation the command performed succeeded.
    diagnostic:
        Optional human-readable description of the outcome.
    """

    succeeded: bool
    diagnostic: str = ""

    def raise_for_failure(self, message_prefix: str = "") -> "CommandResult":
        """Raise ``CommandExecuteError`` if this result did not succeed, else return it."""
        if not self.succeeded:
            raise CommandExecuteError(self, message_prefix)
        return self


SUCCESS = CommandResult(succeeded=True)


class Command(ABC):
    """Base class for executable commands."""

    @abstractmethod
    async def execute(self, registry: ServiceRegistry, context: Any) -> CommandResult:
        """
        Execute this command.

        Args:
            registry: Registry to resolve capabilities from.
            context: User defined context data.

        Returns:
            A ``CommandResult`` describing the outcome.
        """
