from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from dynabind.capabilities.registry import ServiceRegistry

from .base import Command, CommandResult

DelegateReturn = Union[bool, CommandResult]
DelegateFunc = Callable[..., Union[DelegateReturn, Awaitable[DelegateReturn]]]


@dataclass
class DelegateCommand(Command):
    """
    Command backed by a callable.

    The callable is invoked either with no arguments or with
    ``(registry, context)``, depending on its signature, and may be sync or
    async. A bool return value is wrapped in a ``CommandResult``.
    """

    func: DelegateFunc

    async def execute(self, registry: ServiceRegistry, context: Any) -> CommandResult:
        if _takes_no_arguments(self.func):
            outcome = self.func()
        else:
            outcome = self.func(registry, context)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(succeeded=bool(outcome))


def _takes_no_arguments(func: Callable[..., Any]) -> bool:
    params = inspect.signature(func).parameters.values()
    return not any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL) for p in params
    )
