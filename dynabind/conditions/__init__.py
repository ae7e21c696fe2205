"""Conditions: declarative true/false tests over a context object.

A ``Condition`` exposes ``async evaluate(registry, context) -> bool`` and is
used as ``ConditionalCommand.execute_when``.

This package exports:

- ``Condition``, ``TRUE``, ``FALSE``, ``LambdaCondition``
- ``PropertyCompare`` / ``PropertyCompareOp`` and ``PropertyEqualsCondition``
- ``CompoundCondition`` / ``CompoundEvaluationType``
"""

from .base import FALSE, TRUE, AlwaysFalse, AlwaysTrue, Condition, LambdaCondition
from .compound import CompoundCondition, CompoundEvaluationType
from .property_compare import PropertyCompare, PropertyCompareOp, PropertyEqualsCondition

__all__ = [
    "FALSE",
    "TRUE",
    "AlwaysFalse",
    "AlwaysTrue",
    "CompoundCondition",
    "CompoundEvaluationType",
    "Condition",
    "LambdaCondition",
    "PropertyCompare",
    "PropertyCompareOp",
    "PropertyEqualsCondition",
]
