import pytest

from rsmlpy.values import (
    Color3,
    Element,
    Font,
    Offset,
    Rect,
    Scale,
    UDim,
    UDim2,
    Vector2,
    Vector3,
    build_tuple_value,
    construct,
    element_from_group,
    resolve_color,
)
from rsmlpy.values import composite
from rsmlpy.values.model import value_to_data


def _num(value: float) -> Element:
    return Element(composite.NUMBER, value)


def _px(value: float) -> Element:
    return Element(composite.OFFSET, Offset(value))


def _pct(value: float) -> Element:
    return Element(composite.SCALE, Scale(value))


@pytest.mark.parametrize(
    ("lexeme", "expected"),
    [
        ("#FF0000", "FF0000"),
        ("#fff", "FFFFFF"),
        ("tw:blue", "3B82F6"),
        ("tw:blue:600", "2563EB"),
        ("tw:red:500", "EF4444"),
        ("css:blueviolet", "8A2BE2"),
        ("css:blue", "0000FF"),
        ("bc:reallyred", "FF0000"),
        ("bc:white", "F2F3F3"),
    ],
)
def test_resolve_color(lexeme: str, expected: str) -> None:
    color = resolve_color(lexeme)

    assert color is not None
    assert color.to_hex() == expected


@pytest.mark.parametrize("lexeme", ["#FFFF", "#12345", "tw:nothue", "tw:blue:123", "css:nocolor", "bc:nocolor", "red"])
def test_resolve_color_rejects_unknown_forms(lexeme: str) -> None:
    assert resolve_color(lexeme) is None


def test_color3_channels_are_fractions() -> None:
    color = Color3.from_rgb(255, 0, 51)

    assert color.r == 1.0
    assert color.g == 0.0
    assert color.b == pytest.approx(0.2)
    assert color.to_rgb() == (255, 0, 51)


def test_scale_and_offset_group_into_one_axis() -> None:
    element = element_from_group([_pct(0.5), _px(10.0)])

    assert element == Element(composite.AXIS, UDim(0.5, 10.0))
    assert element_from_group([_px(10.0), _pct(0.5)]) == element


@pytest.mark.parametrize(
    "group",
    [
        [],
        [_px(1.0), _px(2.0)],
        [_num(1.0), _px(2.0)],
        [_pct(0.1), _px(2.0), _px(3.0)],
    ],
)
def test_groups_that_are_not_one_axis(group: list[Element]) -> None:
    assert element_from_group(group) is None


def test_single_primitive_group_passes_through() -> None:
    assert element_from_group([_num(3.0)]) == _num(3.0)


@pytest.mark.parametrize(
    ("elements", "expected"),
    [
        ([_px(5.0)], UDim(0.0, 5.0)),
        ([_pct(0.25)], UDim(0.25, 0.0)),
        ([_num(1.0), _num(2.0)], Vector2(1.0, 2.0)),
        ([_px(10.0), _px(20.0)], UDim2.from_offset(10.0, 20.0)),
        ([_pct(1.0), _pct(0.5)], UDim2.from_scale(1.0, 0.5)),
        (
            [Element(composite.AXIS, UDim(0.5, 10.0)), _px(4.0)],
            UDim2(UDim(0.5, 10.0), UDim(0.0, 4.0)),
        ),
        ([_num(1.0), _num(2.0), _num(3.0)], Vector3(1.0, 2.0, 3.0)),
        ([_num(0.0), _num(1.0), _num(2.0), _num(3.0)], Rect(Vector2(0.0, 1.0), Vector2(2.0, 3.0))),
        ([_px(0.0), _px(1.0), _px(2.0), _px(3.0)], Rect(Vector2(0.0, 1.0), Vector2(2.0, 3.0))),
        (
            [Element(composite.STRING, "Gotham"), Element(composite.ENUM, "Enum.FontWeight.Bold")],
            Font("Gotham", "Bold"),
        ),
        (
            [
                Element(composite.STRING, "Gotham"),
                Element(composite.TEXT, "Light"),
                Element(composite.ENUM, "Enum.FontStyle.Italic"),
            ],
            Font("Gotham", "Light", "Italic"),
        ),
    ],
)
def test_composite_table(elements: list[Element], expected: object) -> None:
    assert build_tuple_value(elements) == expected


def test_single_non_axis_element_unwraps() -> None:
    assert build_tuple_value([Element(composite.STRING, "x")]) == "x"


def test_unknown_shapes_have_no_value() -> None:
    assert build_tuple_value([_num(1.0), _px(2.0)]) is None
    assert build_tuple_value([_num(1.0)] * 5) is None
    assert build_tuple_value([Element(composite.BOOL, True), _num(1.0)]) is None


@pytest.mark.parametrize(
    ("name", "elements", "expected"),
    [
        ("rgb", [_num(255.0), _num(0.0), _num(0.0)], Color3(1.0, 0.0, 0.0)),
        ("Color3", [_num(1.0), _num(0.5), _num(0.0)], Color3(1.0, 0.5, 0.0)),
        ("udim", [_num(0.5), _num(4.0)], UDim(0.5, 4.0)),
        ("UDim2", [_num(1.0), _num(0.0), _num(0.5), _num(8.0)], UDim2(UDim(1.0, 0.0), UDim(0.5, 8.0))),
        ("vec2", [_num(1.0), _num(2.0)], Vector2(1.0, 2.0)),
        ("Vector3", [_num(1.0), _num(2.0), _num(3.0)], Vector3(1.0, 2.0, 3.0)),
        ("rect", [_num(0.0), _num(0.0), _num(4.0), _num(4.0)], Rect(Vector2(0.0, 0.0), Vector2(4.0, 4.0))),
        ("font", [Element(composite.STRING, "Arial")], Font("Arial")),
    ],
)
def test_keyword_constructors(name: str, elements: list[Element], expected: object) -> None:
    assert construct(name, elements) == expected


def test_keyword_constructor_rejects_bad_arguments() -> None:
    assert construct("rgb", [_num(1.0), _num(2.0)]) is None
    assert construct("udim", [_px(1.0), _num(2.0)]) is None
    assert construct("font", [_num(1.0)]) is None
    assert construct("unknown", [_num(1.0)]) is None


def test_value_to_data() -> None:
    assert value_to_data(True) is True
    assert value_to_data(2.5) == 2.5
    assert value_to_data(Offset(3.0)) == {"type": "Offset", "value": 3.0}
    assert value_to_data(UDim2.from_offset(1.0, 2.0)) == {
        "type": "UDim2",
        "x": {"type": "UDim", "scale": 0.0, "offset": 1.0},
        "y": {"type": "UDim", "scale": 0.0, "offset": 2.0},
    }
    assert value_to_data(Rect(Vector2(0.0, 1.0), Vector2(2.0, 3.0))) == {
        "type": "Rect",
        "min": [0.0, 1.0],
        "max": [2.0, 3.0],
    }


def test_value_to_data_rejects_foreign_objects() -> None:
    with pytest.raises(TypeError, match="Not an RSML value"):
        value_to_data(object())  # type: ignore[arg-type]
