"""Client-facing helpers: shapes, a counter and greetings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from eszett.part_of_speech import PartOfSpeechDto


class Color(Enum):
    """A primary colour."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"


@dataclass(frozen=True)
class ColorShape:
    """A shape described only by its colour; it can be written but not read."""

    primary_color: Color


@dataclass(frozen=True)
class Circle:
    """A circle of radius r."""

    r: float


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with sides x and y."""

    x: float
    y: float


@dataclass(frozen=True)
class Triangle:
    """A triangle with sides a, b and c."""

    a: float
    b: float
    c: float


Shape = Union[ColorShape, Circle, Rectangle, Triangle]

_READABLE_SHAPES = {
    "Circle": (Circle, ("r",)),
    "Rectangle": (Rectangle, ("x", "y")),
    "Triangle": (Triangle, ("a", "b", "c")),
}


def _number(data: dict[str, Any], field: str) -> float:
    if field not in data:
        raise ValueError(f"missing field `{field}`")
    value = data[field]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{field}` is not a number")
    return float(value)


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Read a shape from its tagged dictionary form."""
    if not isinstance(data, dict):
        raise ValueError("shape must be a mapping")
    if "type" not in data:
        raise ValueError("missing field `type`")
    tag = data["type"]
    try:
        cls, fields = _READABLE_SHAPES[tag]
    except (KeyError, TypeError):
        raise ValueError(f"unknown variant `{tag}`") from None
    return cls(*(_number(data, field) for field in fields))


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Write a shape as a dictionary tagged with its variant name."""
    if isinstance(shape, ColorShape):
        return {"type": "Color", "primaryColor": {"type": shape.primary_color.value}}
    if isinstance(shape, Circle):
        return {"type": "Circle", "r": shape.r}
    if isinstance(shape, Rectangle):
        return {"type": "Rectangle", "x": shape.x, "y": shape.y}
    if isinstance(shape, Triangle):
        return {"type": "Triangle", "a": shape.a, "b": shape.b, "c": shape.c}
    raise TypeError(f"not a shape: {shape!r}")


class Counter:
    """A counter that starts at zero and only goes up."""

    def __init__(self) -> None:
        self._value = 0

    def increment(self) -> None:
        """Add one to the counter."""
        self._value += 1

    @property
    def value(self) -> int:
        """The current count."""
        return self._value


def print_a_part_of_speech(part: PartOfSpeechDto) -> None:
    """Print the variant name of a part of speech."""
    print(part.name.capitalize())


def greet(name: str) -> str:
    """Return a greeting for name."""
    return f"Hello, {name}!"