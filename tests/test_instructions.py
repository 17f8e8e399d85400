import dataclasses

import pytest

from pixlang.instructions import (
    Clear,
    ColorBlock,
    Draw,
    EvaluatedProgram,
    EvaluateError,
    Export,
    Frame,
    Layer,
    Mirror,
)
from pixlang.syntax import (
    ColorEntry,
    CoordinateX,
    Format,
    HexadecimalColor,
    Number,
    Operator,
    BinaryOperation,
    Point,
)


def _condition():
    return BinaryOperation(CoordinateX(), Operator.LESS_THAN, Number(5))


def test_evaluate_error_carries_message():
    error = EvaluateError("division by zero")
    assert error.message == "division by zero"
    assert str(error) == "division by zero"
    assert isinstance(error, Exception)


def test_minimal_evaluated_program_equality():
    program = EvaluatedProgram(10, 10, [])
    assert program == EvaluatedProgram(10, 10)
    assert program.instructions == ()


def test_draw_equality_depends_on_color():
    red = Draw(_condition(), HexadecimalColor("FF0000"))
    assert red == Draw(_condition(), HexadecimalColor("FF0000"))
    assert red != Draw(_condition(), HexadecimalColor("00FF00"))


def test_export_scale_defaults_to_none():
    assert Export("output", Format.PNG).scale is None
    assert Export("output", Format.PNG, 4).scale == 4


def test_layer_and_mirror_hold_tuples():
    layer = Layer("fundo", [Clear()])
    mirror = Mirror(Point(0, 0), Point(7, 7), [layer])
    assert layer.instructions == (Clear(),)
    assert mirror.instructions == (layer,)


def test_color_block_entries_are_copied():
    entries = [ColorEntry("red", "FF0000")]
    block = ColorBlock(entries)
    entries.clear()
    assert block.entries == (ColorEntry("red", "FF0000"),)


def test_instructions_are_hashable_and_deduplicate():
    assert len({Frame(100), Frame(100), Clear(), Clear()}) == 2


def test_instructions_are_immutable():
    frame = Frame(100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        frame.delay = 200
    assert frame.delay == 100
    assert frame == Frame(100)