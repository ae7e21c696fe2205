from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType, SimpleNamespace
from typing import Any, Dict, Optional

import pytest

from dynabind.errors import PropertyNotFoundError, PropertyResolutionError
from dynabind.runtime.accessor import DynamicObject
from dynabind.runtime.resolver import PropertyResolver


@dataclass
class _Address:
    city: str = "Paris"


@dataclass
class _Person:
    first_name: Optional[str] = None
    age: int = 0
    address: _Address = field(default_factory=_Address)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class _Frozen:
    value: int = 1


class TestGetPropertyValue:
    def test_dict_key(self) -> None:
        assert PropertyResolver.get_property_value({"id": 7}, "id") == 7

    def test_object_attribute(self) -> None:
        assert PropertyResolver.get_property_value(_Person(age=42), "age") == 42

    def test_property_accessor(self) -> None:
        ctx = DynamicObject(id=3)
        assert PropertyResolver.get_property_value(ctx, "id") == 3

    def test_dotted_path_across_shapes(self) -> None:
        person = _Person(extra={"tags": SimpleNamespace(first="a")})
        assert PropertyResolver.get_property_value(person, "address.city") == "Paris"
        assert PropertyResolver.get_property_value(person, "extra.tags.first") == "a"

    def test_none_value_is_returned(self) -> None:
        assert PropertyResolver.get_property_value(_Person(), "first_name") is None

    @pytest.mark.parametrize(
        "target",
        [{"id": 1}, _Person(), DynamicObject(id=1)],
    )
    def test_missing_property_raises(self, target: Any) -> None:
        with pytest.raises(PropertyNotFoundError) as exc:
            PropertyResolver.get_property_value(target, "nope")
        assert exc.value.property_name == "nope"
        assert exc.value.target_type is type(target)

    def test_missing_intermediate_segment_raises(self) -> None:
        with pytest.raises(PropertyNotFoundError):
            PropertyResolver.get_property_value({"a": {}}, "a.b.c")

    def test_none_target_raises_resolution_error(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.get_property_value(None, "id")

    def test_none_in_the_middle_of_a_path_raises(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.get_property_value({"a": None}, "a.b")

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_malformed_path_raises(self, path: str) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.get_property_value({"a": {"b": 1}}, path)

    def test_get_has_no_side_effects(self) -> None:
        ctx = {"id": 7}
        PropertyResolver.get_property_value(ctx, "id")
        assert ctx == {"id": 7}


class TestSetPropertyValue:
    def test_dict_new_key(self) -> None:
        ctx: Dict[str, Any] = {"id": 7}
        PropertyResolver.set_property_value(ctx, "profile", {"name": "Ada"})
        assert ctx == {"id": 7, "profile": {"name": "Ada"}}

    def test_object_existing_attribute(self) -> None:
        person = _Person()
        PropertyResolver.set_property_value(person, "first_name", "Dude")
        assert person.first_name == "Dude"

    def test_object_unknown_attribute_raises(self) -> None:
        person = _Person()
        with pytest.raises(PropertyNotFoundError):
            PropertyResolver.set_property_value(person, "last_name", "x")
        assert not hasattr(person, "last_name")

    def test_property_accessor(self) -> None:
        ctx = DynamicObject()
        PropertyResolver.set_property_value(ctx, "profile", 1)
        assert ctx.get_property_value("profile") == 1

    def test_dotted_path_writes_leaf(self) -> None:
        person = _Person()
        PropertyResolver.set_property_value(person, "address.city", "Oslo")
        assert person.address.city == "Oslo"

    def test_dotted_path_missing_parent_raises(self) -> None:
        ctx: Dict[str, Any] = {}
        with pytest.raises(PropertyNotFoundError):
            PropertyResolver.set_property_value(ctx, "a.b", 1)
        assert ctx == {}

    def test_read_only_mapping_raises(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.set_property_value(MappingProxyType({"a": 1}), "a", 2)

    def test_frozen_object_raises(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.set_property_value(_Frozen(), "value", 2)

    def test_none_target_raises(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.set_property_value(None, "a", 1)

    def test_write_is_visible_through_shared_reference(self) -> None:
        ctx: Dict[str, Any] = {}
        alias = ctx
        PropertyResolver.set_property_value(ctx, "x", 1)
        assert alias["x"] == 1


def test_has_property() -> None:
    assert PropertyResolver.has_property({"a": {"b": 1}}, "a.b") is True
    assert PropertyResolver.has_property({"a": {}}, "a.b") is False
    assert PropertyResolver.has_property(None, "a") is False


class TestResolvePropertyValues:
    def test_curly_and_dollar_paren_placeholders(self) -> None:
        ctx = {"id": 1, "kind": "todos"}
        assert PropertyResolver.resolve_property_values(ctx, "{kind}/$(id)") == "todos/1"

    def test_format_spec(self) -> None:
        assert PropertyResolver.resolve_property_values({"id": 7}, "item-{id:03d}") == "item-007"

    def test_unresolved_placeholder_is_kept(self) -> None:
        assert PropertyResolver.resolve_property_values({}, "users/{id}") == "users/{id}"

    def test_none_target_keeps_placeholders(self) -> None:
        assert PropertyResolver.resolve_property_values(None, "posts/$(id)") == "posts/$(id)"

    def test_none_value_renders_empty(self) -> None:
        assert PropertyResolver.resolve_property_values({"q": None}, "search?q={q}") == "search?q="

    def test_dotted_placeholder(self) -> None:
        assert PropertyResolver.resolve_property_values(_Person(), "city={address.city}") == "city=Paris"

    def test_no_placeholders(self) -> None:
        assert PropertyResolver.resolve_property_values({"a": 1}, "plain/path") == "plain/path"
        assert PropertyResolver.resolve_property_values({"a": 1}, "") == ""

    def test_bad_format_spec_raises(self) -> None:
        with pytest.raises(PropertyResolutionError):
            PropertyResolver.resolve_property_values({"name": "x"}, "{name:d}")

    def test_substituted_values_are_not_expanded_again(self) -> None:
        ctx = {"q": "$(token)", "token": "SECRET"}
        assert PropertyResolver.resolve_property_values(ctx, "search/{q}") == "search/$(token)"
        ctx = {"q": "{token}", "token": "SECRET"}
        assert PropertyResolver.resolve_property_values(ctx, "search/$(q)") == "search/{token}"

    def test_escape_applies_to_each_value_only(self) -> None:
        rendered = PropertyResolver.resolve_property_values({"a": "x", "b": "y"}, "{a}-$(b)", escape=str.upper)
        assert rendered == "X-Y"


class TestTryResolveSinglePropertyValue:
    def test_returns_raw_value(self) -> None:
        assert PropertyResolver.try_resolve_single_property_value({"id": 5}, "{id}") == (True, 5)
        assert PropertyResolver.try_resolve_single_property_value({"id": 5}, "$(id)") == (True, 5)

    def test_missing_property(self) -> None:
        assert PropertyResolver.try_resolve_single_property_value({}, "{id}") == (False, None)

    def test_placeholder_must_lead(self) -> None:
        assert PropertyResolver.try_resolve_single_property_value({"id": 5}, "x{id}") == (False, None)
        assert PropertyResolver.try_resolve_single_property_value({"id": 5}, "") == (False, None)
