"""Tests for the JSON helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from selectorkit.errors import SelectorkitError, SerializationError
from selectorkit.serialize import from_json, to_json
from selectorkit.shapes import Rectangle


@dataclass
class Circle:
    radius: float


@dataclass
class Tagged:
    name: str
    tags: list[str] = field(default_factory=list)
    weight: int = 1


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert to_json("a") == '"a"'
        assert to_json(None) == "null"
        assert to_json(True) == "true"

    def test_dataclass_instance(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert to_json({"shapes": [Circle(1)]}) == '{"shapes":[{"radius":1}]}'

    def test_indent(self):
        assert to_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserializable_raises(self):
        with pytest.raises(SerializationError) as exc_info:
            to_json({"x": object()})
        assert isinstance(exc_info.value.cause, TypeError)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_builds_target_type(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_rectangle_round_trip_keeps_behaviour(self):
        r = from_json(Rectangle, to_json(Rectangle(10, 20)))
        assert r == Rectangle(10, 20)
        assert r.area() == 200

    def test_defaults_fill_optional_fields(self):
        t = from_json(Tagged, '{"name": "x"}')
        assert t == Tagged(name="x", tags=[], weight=1)

    def test_unknown_keys_ignored(self):
        c = from_json(Circle, '{"radius": 3, "color": "red"}')
        assert c == Circle(radius=3)

    def test_missing_required_field(self):
        with pytest.raises(SerializationError, match="radius"):
            from_json(Circle, "{}")

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="Invalid JSON") as exc_info:
            from_json(Circle, "{radius: 1")
        assert exc_info.value.cause is not None

    def test_non_object_json(self):
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json(Circle, "[1, 2]")

    def test_target_must_be_dataclass_type(self):
        with pytest.raises(SerializationError):
            from_json(dict, '{"a": 1}')

    def test_is_selectorkit_error(self):
        assert issubclass(SerializationError, SelectorkitError)
