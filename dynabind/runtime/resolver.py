from __future__ import annotations

"""Property path resolution against untyped context objects.

``PropertyResolver`` is the single place where the pipeline touches the shape
of a context object. Everything else passes property names around as strings.

Supported target shapes, in lookup order:

- objects satisfying ``PropertyAccessor``,
- ``Mapping`` objects (by key; writes need a ``MutableMapping``),
- any other object (by attribute; writes need the attribute to exist already).

A path is one property name, or several joined by ``.`` to traverse nested
objects (``"customer.address.city"``). Every segment but the last is read; the
last one is read or written.
"""

import re
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, List, Optional, Pattern, Tuple

from dynabind.core.logging_config import get_logger
from dynabind.errors import PropertyNotFoundError, PropertyResolutionError

from .accessor import PropertyAccessor

logger = get_logger(__name__)

PATH_SEPARATOR = "."

# Placeholders: {name} or $(name), each with an optional ``:format_spec`` suffix.
# Both syntaxes share one pattern so a template is scanned exactly once.
_PLACEHOLDER: Pattern[str] = re.compile(r"\{([^{}]+)\}|\$\(([^()]+)\)")


def _split_path(target: Any, path: str) -> List[str]:
    if not path:
        raise PropertyResolutionError(type(target), path, "Property path must not be empty")
    segments = path.split(PATH_SEPARATOR)
    if any(not s for s in segments):
        raise PropertyResolutionError(type(target), path, f"Malformed property path '{path}'")
    return segments


def _get_segment(target: Any, name: str) -> Any:
    if target is None:
        raise PropertyResolutionError(None, name, f"Cannot read property '{name}' from None")
    if isinstance(target, PropertyAccessor):
        return target.get_property_value(name)
    if isinstance(target, Mapping):
        try:
            return target[name]
        except KeyError:
            raise PropertyNotFoundError(type(target), name) from None
    try:
        return getattr(target, name)
    except AttributeError:
        raise PropertyNotFoundError(type(target), name) from None


def _set_segment(target: Any, name: str, value: Any) -> None:
    if target is None:
        raise PropertyResolutionError(None, name, f"Cannot write property '{name}' on None")
    if isinstance(target, PropertyAccessor):
        target.set_property_value(name, value)
        return
    if isinstance(target, MutableMapping):
        target[name] = value
        return
    if isinstance(target, Mapping):
        raise PropertyResolutionError(type(target), name, f"Cannot write property '{name}' on a read-only mapping")
    if not hasattr(target, name):
        raise PropertyNotFoundError(type(target), name)
    try:
        setattr(target, name, value)
    except AttributeError as e:
        raise PropertyResolutionError(type(target), name, f"Property '{name}' is not writable: {e}") from e


class PropertyResolver:
    """Get, set and template-substitute named properties on context objects."""

    @staticmethod
    def get_property_value(target: Any, path: str) -> Any:
        """
        Read a property path from ``target``.

        Args:
            target: The context object.
            path: A property name, or a dot-separated path of names.

        Returns:
            The resolved value.

        Raises:
            PropertyNotFoundError: If a segment does not exist on the object it is resolved against.
            PropertyResolutionError: If the target is None or the path is malformed.
        """
        current = target
        for segment in _split_path(target, path):
            current = _get_segment(current, segment)
        return current

    @staticmethod
    def set_property_value(target: Any, path: str, value: Any) -> None:
        """
        Write ``value`` at a property path on ``target``, in place.

        Intermediate segments must already resolve; only the final segment is written.

        Raises:
            PropertyNotFoundError: If an intermediate segment is missing, or the final
                attribute does not exist on a plain object.
            PropertyResolutionError: If the final segment cannot be written.
        """
        segments = _split_path(target, path)
        parent = target
        for segment in segments[:-1]:
            parent = _get_segment(parent, segment)
        _set_segment(parent, segments[-1], value)
        logger.debug("PropertyResolver.set_property_value: %s on %s", path, type(target).__name__)

    @classmethod
    def has_property(cls, target: Any, path: str) -> bool:
        try:
            cls.get_property_value(target, path)
        except PropertyResolutionError:
            return False
        return True

    @classmethod
    def resolve_property_values(
        cls, target: Any, source: str, escape: Optional[Callable[[str], str]] = None
    ) -> str:
        """
        Substitute ``{name}`` and ``$(name)`` placeholders in ``source`` with values from ``target``.

        A placeholder may carry a format spec (``{id:03d}``) applied with ``format``.
        Placeholders whose property cannot be resolved are left as-is, and None values
        render as an empty string. Substituted text is never scanned for placeholders
        again, so a value containing ``$(other)`` is inserted literally.

        Args:
            target: The context object supplying values.
            source: The template.
            escape: Optional function applied to each rendered value (e.g. URL quoting).

        Raises:
            PropertyResolutionError: If a format spec is not valid for the resolved value.
        """
        if not source:
            return source
        return _PLACEHOLDER.sub(lambda m: cls._render(target, m, escape), source)

    @classmethod
    def try_resolve_single_property_value(cls, target: Any, source: str) -> Tuple[bool, Any]:
        """
        Resolve the placeholder at the very start of ``source`` to its raw (unformatted) value.

        Returns:
            ``(True, value)`` when ``source`` starts with a placeholder whose property
            resolves, otherwise ``(False, None)``.
        """
        if not source:
            return False, None
        match = _PLACEHOLDER.match(source)
        if match is None:
            return False, None
        name = _placeholder_body(match).partition(":")[0]
        try:
            return True, cls.get_property_value(target, name)
        except PropertyResolutionError:
            return False, None

    @classmethod
    def _render(cls, target: Any, match: "re.Match[str]", escape: Optional[Callable[[str], str]]) -> str:
        name, _, spec = _placeholder_body(match).partition(":")
        try:
            value = cls.get_property_value(target, name)
        except PropertyResolutionError:
            return match.group(0)
        if value is None:
            return ""
        if not spec:
            text = str(value)
        else:
            try:
                text = format(value, spec)
            except (TypeError, ValueError) as e:
                raise PropertyResolutionError(
                    type(target), name, f"Format specification '{spec}' not supported for property '{name}'"
                ) from e
        return escape(text) if escape is not None else text


def _placeholder_body(match: "re.Match[str]") -> str:
    return match.group(1) if match.group(1) is not None else match.group(2)
