from __future__ import annotations

"""Condition contract and the trivial conditions.

A condition evaluates to true or false against the same ``(registry, context)``
pair a command executes with. ``ConditionalCommand`` uses one to decide
whether its wrapped command runs.
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from dynabind.capabilities.registry import ServiceRegistry


class Condition(ABC):
    """Base class for conditions."""

    @abstractmethod
    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        """
        Evaluate the condition.

        Args:
            registry: Registry to resolve capabilities from.
            context: User defined context data.

        Returns:
            True or False.
        """


class AlwaysTrue(Condition):
    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "TRUE"


class AlwaysFalse(Condition):
    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "FALSE"


TRUE = AlwaysTrue()
FALSE = AlwaysFalse()


ContextPredicate = Callable[[Any], Union[bool, Awaitable[bool]]]


@dataclass
class LambdaCondition(Condition):
    """Condition backed by a callable taking the context. Without a callable it is false."""

    expr: Optional[ContextPredicate] = None

    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        if self.expr is None:
            return False
        verdict = self.expr(context)
        if inspect.isawaitable(verdict):
            verdict = await verdict
        return bool(verdict)
