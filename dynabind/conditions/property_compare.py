from __future__ import annotations

"""Conditions that compare a context property against a value.

``PropertyCompare`` is fully declarative: a property path, a value and an
operator name, so it can be built from configuration::

    PropertyCompare(property_name="age", property_value=50, operator="gt")

A string ``property_value`` is run through ``PropertyResolver.resolve_property_values``
first, so it may reference other context properties (``"$(last_name)"``).
"""

import operator as _op
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Union

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.core.logging_config import get_logger
from dynabind.errors import ConditionEvalError
from dynabind.runtime.resolver import PropertyResolver

from .base import Condition

logger = get_logger(__name__)


class PropertyCompareOp(str, Enum):
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUAL = "ge"
    LESS_THAN_OR_EQUAL = "le"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"


def _numeric(fn: Callable[[float, float], bool]) -> Callable[[Any, Any], bool]:
    def compare(current: Any, expected: Any) -> bool:
        try:
            return fn(float(current), float(expected))
        except (TypeError, ValueError) as e:
            raise ConditionEvalError(f"cannot compare {current!r} and {expected!r} as numbers") from e

    return compare


_COMPARERS: Dict[PropertyCompareOp, Callable[[Any, Any], bool]] = {
    PropertyCompareOp.EQUAL: _op.eq,
    PropertyCompareOp.NOT_EQUAL: _op.ne,
    PropertyCompareOp.GREATER_THAN: _numeric(_op.gt),
    PropertyCompareOp.LESS_THAN: _numeric(_op.lt),
    PropertyCompareOp.GREATER_THAN_OR_EQUAL: _numeric(_op.ge),
    PropertyCompareOp.LESS_THAN_OR_EQUAL: _numeric(_op.le),
    PropertyCompareOp.CONTAINS: lambda cur, exp: str(exp) in str(cur),
    PropertyCompareOp.STARTS_WITH: lambda cur, exp: str(cur).startswith(str(exp)),
    PropertyCompareOp.ENDS_WITH: lambda cur, exp: str(cur).endswith(str(exp)),
}


@dataclass
class PropertyCompare(Condition):
    """
    Compare the value of ``property_name`` on the context with ``property_value``.

    Both values None is true, exactly one None is false. Ordering operators compare
    as floats. The string operators compare ``str()`` forms.

    Raises (from ``evaluate``):
        PropertyNotFoundError: If the property does not exist on the context.
        ConditionEvalError: If an ordering operator gets non-numeric values.
    """

    property_name: str = ""
    property_value: Any = None
    operator: Union[PropertyCompareOp, str] = PropertyCompareOp.EQUAL

    def __post_init__(self) -> None:
        self.operator = PropertyCompareOp(self.operator)

    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        expected = self.property_value
        if isinstance(expected, str):
            expected = PropertyResolver.resolve_property_values(context, expected)

        current = PropertyResolver.get_property_value(context, self.property_name)

        if current is None or expected is None:
            return current is None and expected is None

        verdict = _COMPARERS[PropertyCompareOp(self.operator)](current, expected)
        logger.debug(
            "PropertyCompare.evaluate: %s %s %r -> %s", self.property_name, self.operator.value, expected, verdict
        )
        return verdict


@dataclass
class PropertyEqualsCondition(Condition):
    """Equality check of a context property against a literal value (no template resolution)."""

    property_name: str = ""
    property_value: Any = None

    async def evaluate(self, registry: ServiceRegistry, context: Any) -> bool:
        current = PropertyResolver.get_property_value(context, self.property_name)
        if current is None or self.property_value is None:
            return current is None and self.property_value is None
        return bool(current == self.property_value)
