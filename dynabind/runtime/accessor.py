"""Property accessor protocol and a dict-backed dynamic context object.

Context objects that want full control over how named values are read and
written implement ``PropertyAccessor``. ``PropertyResolver`` prefers this
protocol over key or attribute access when a target satisfies it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Protocol, runtime_checkable

from dynabind.errors import PropertyNotFoundError


@runtime_checkable
class PropertyAccessor(Protocol):
    """Protocol for objects that expose named properties dynamically."""

    def get_property_value(self, property_name: str) -> Any: ...

    def set_property_value(self, property_name: str, value: Any) -> "PropertyAccessor": ...

    def get_property_names(self) -> Iterable[str]: ...


class DynamicObject:
    """Context object whose properties live in an internal dictionary.

    Properties can be read and written either through the ``PropertyAccessor``
    methods or as attributes::

        ctx = DynamicObject(id=7)
        ctx.profile = {"name": "Ada"}
        ctx.get_property_value("profile")

    Reading a property that was never set raises ``PropertyNotFoundError``
    (or ``AttributeError`` for attribute syntax). Writing always succeeds.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        object.__setattr__(self, "_values", {})
        if values:
            self._values.update(values)
        self._values.update(kwargs)

    def get_property_value(self, property_name: str) -> Any:
        try:
            return self._values[property_name]
        except KeyError:
            raise PropertyNotFoundError(type(self), property_name) from None

    def set_property_value(self, property_name: str, value: Any) -> "DynamicObject":
        self._values[property_name] = value
        return self

    def get_property_names(self) -> Iterator[str]:
        return iter(list(self._values))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __getattr__(self, name: str) -> Any:
        if name == "_values":
            # slot not initialised yet (copy/pickle)
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_values":
            object.__setattr__(self, name, value)
            return
        self._values[name] = value

    def __getstate__(self) -> Dict[str, Any]:
        return dict(self._values)

    def __setstate__(self, state: Dict[str, Any]) -> None:
        object.__setattr__(self, "_values", dict(state))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicObject):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"DynamicObject({self._values!r})"
