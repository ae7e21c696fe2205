from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Union

from dynabind.capabilities.registry import ServiceRegistry

from .base import Condition


class CompoundEvaluationType(str, Enum):
    ANY = "any"
    ALL = "all"


@dataclass
class CompoundCondition(Condition):
    """
    Combine several conditions with ALL (and) or ANY (or) semantics.

    Children are evaluated in order and evaluation stops as soon as the outcome
    is known. An empty ALL is true, an empty ANY is false.
    """

    conditions: List[Condition] = field(default_factory=list)
    evaluation_type: Union[CompoundEvaluationType, str] = CompoundEvaluationType.ALL

    def __post_init__(self) -> None:
        self.evaluation_type = CompoundEvaluationType(self.evaluation_type)

    def add(self, condition: Condition) -> "CompoundCondition":
        self.conditions.append(condition)
        return self

    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        if self.evaluation_type == CompoundEvaluationType.ANY:
            for condition in self.conditions:
                if await condition.evaluate(registry, context):
                    return True
            return False
        for condition in self.conditions:
            if not await condition.evaluate(registry, context):
                return False
        return True
