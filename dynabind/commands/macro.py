from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.core.logging_config import get_logger

from .base import Command, CommandResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class MacroCommandResult(CommandResult):
    """Aggregate of the results of the commands run by a ``MacroCommand``."""

    results: Tuple[CommandResult, ...] = ()

    @classmethod
    def from_results(cls, results: Sequence[CommandResult]) -> "MacroCommandResult":
        succeeded = sum(1 for r in results if r.succeeded)
        failed = len(results) - succeeded
        return cls(
            succeeded=failed == 0,
            diagnostic=f"{len(results)} commands executed - {succeeded} successful and {failed} failed",
            results=tuple(results),
        )


@dataclass
class MacroCommand(Command):
    """
    Command that executes a sequence of commands against the same registry and context.

    Children run one at a time, in order. With ``stop_on_failure`` the macro
    stops at the first child whose result did not succeed; the remaining
    children are not executed. Exceptions raised by a child propagate.
    """

    commands: List[Command] = field(default_factory=list)
    stop_on_failure: bool = True

    def add(self, command: Command) -> "MacroCommand":
        self.commands.append(command)
        return self

    async def execute(self, registry: ServiceRegistry, context: Any) -> MacroCommandResult:
        results: List[CommandResult] = []
        for command in self.commands:
            result = await command.execute(registry, context)
            results.append(result)
            if not result.succeeded and self.stop_on_failure:
                logger.debug(
                    "MacroCommand.execute: %s failed, stopping after %d of %d",
                    type(command).__name__,
                    len(results),
                    len(self.commands),
                )
                break
        return MacroCommandResult.from_results(results)
