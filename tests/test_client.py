import pytest

from eszett.client import (
    Circle,
    Color,
    ColorShape,
    Counter,
    Rectangle,
    Triangle,
    greet,
    print_a_part_of_speech,
    shape_from_dict,
    shape_to_dict,
)
from eszett.part_of_speech import PartOfSpeechDto


@pytest.mark.parametrize(
    "shape",
    [Circle(1.5), Rectangle(2.0, 3.0), Triangle(3.0, 4.0, 5.0)],
)
def test_shape_round_trip(shape):
    assert shape_from_dict(shape_to_dict(shape)) == shape


def test_shape_dict_is_tagged():
    data = shape_to_dict(Rectangle(2.0, 3.0))
    assert data["type"] == "Rectangle"
    assert data["x"] == 2.0 and data["y"] == 3.0


def test_color_shape_is_written_with_camel_case():
    data = shape_to_dict(ColorShape(Color.RED))
    assert data == {"type": "Color", "primaryColor": {"type": "Red"}}


def test_color_shape_cannot_be_read():
    with pytest.raises(ValueError):
        shape_from_dict({"type": "Color", "primaryColor": {"type": "Red"}})


def test_shape_from_dict_accepts_integers():
    assert shape_from_dict({"type": "Circle", "r": 2}) == Circle(2.0)


@pytest.mark.parametrize(
    "data",
    [
        {"r": 1.0},
        {"type": "Hexagon"},
        {"type": "Circle"},
        {"type": "Rectangle", "x": 1.0},
        {"type": "Circle", "r": "wide"},
        {"type": "Circle", "r": True},
    ],
)
def test_shape_from_dict_rejects_bad_input(data):
    with pytest.raises(ValueError):
        shape_from_dict(data)


def test_counter_starts_at_zero_and_increments():
    counter = Counter()
    assert counter.value == 0
    for _ in range(3):
        counter.increment()
    assert counter.value == 3


def test_counters_are_independent():
    first, second = Counter(), Counter()
    first.increment()
    assert (first.value, second.value) == (1, 0)


def test_greet():
    assert greet("Ada") == "Hello, Ada!"
    assert greet("") == "Hello, !"


def test_print_a_part_of_speech(capsys):
    print_a_part_of_speech(PartOfSpeechDto.NOUN)
    print_a_part_of_speech(PartOfSpeechDto.ADJECTIVE)
    assert capsys.readouterr().out == "Noun\nAdjective\n"