"""Dynamic property access for context objects.

This package exports:

- ``PropertyResolver``: get/set/template resolution of property paths.
- ``PropertyAccessor``: protocol for objects that expose properties dynamically.
- ``DynamicObject``: a dict-backed context object implementing the protocol.
"""

from .accessor import DynamicObject, PropertyAccessor
from .resolver import PropertyResolver

__all__ = [
    "DynamicObject",
    "PropertyAccessor",
    "PropertyResolver",
]
