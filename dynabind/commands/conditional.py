from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.conditions.base import Condition

from .base import SUCCESS, Command, CommandResult

Predicate = Callable[[ServiceRegistry, Any], Union[bool, Awaitable[bool]]]


@dataclass
class ConditionalCommand(Command):
    """
    Command that guards another command with a condition.

    ``execute_when`` is either a ``Condition`` (``PropertyCompare``,
    ``CompoundCondition``, ...) or a plain predicate called with
    ``(registry, context)``, sync or async. ``command`` runs when ``execute_when``
    is None or evaluates truthy. Otherwise the wrapped command is skipped and
    ``SUCCESS`` is returned.
    """

    command: Command
    execute_when: Optional[Union[Condition, Predicate]] = None

    async def _should_execute(self, registry: ServiceRegistry, context: Any) -> bool:
        if self.execute_when is None:
            return True
        if isinstance(self.execute_when, Condition):
            return await self.execute_when.evaluate(registry, context)
        verdict = self.execute_when(registry, context)
        if inspect.isawaitable(verdict):
            verdict = await verdict
        return bool(verdict)

    async def execute(self, registry: ServiceRegistry, context: Any) -> CommandResult:
        if not await self._should_execute(registry, context):
            return SUCCESS
        return await self.command.execute(registry, context)
