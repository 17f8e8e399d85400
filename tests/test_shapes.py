import operator as op

from pixlang import shapes
from pixlang.syntax import (
    BinaryOperation,
    CoordinateX,
    CoordinateY,
    Number,
    Operator,
    Point,
    UnaryNot,
)

_OPERATIONS = {
    Operator.ADD: op.add,
    Operator.SUBTRACT: op.sub,
    Operator.MULTIPLY: op.mul,
    Operator.POWER: op.pow,
    Operator.EQUAL: op.eq,
    Operator.LESS_THAN: op.lt,
    Operator.GREATER_THAN: op.gt,
    Operator.LESS_THAN_OR_EQUAL: op.le,
    Operator.GREATER_THAN_OR_EQUAL: op.ge,
    Operator.AND: lambda a, b: a and b,
    Operator.OR: lambda a, b: a or b,
}


def _value(expression, x, y):
    if isinstance(expression, Number):
        return expression.value
    if isinstance(expression, CoordinateX):
        return x
    if isinstance(expression, CoordinateY):
        return y
    if isinstance(expression, UnaryNot):
        return not _value(expression.operand, x, y)
    left = _value(expression.left, x, y)
    right = _value(expression.right, x, y)
    return _OPERATIONS[expression.operator](left, right)


def is_inside(expression, x, y):
    result = _value(expression, x, y)
    assert isinstance(result, bool)
    return result


def inside(expression, points):
    return [is_inside(expression, x, y) for x, y in points]


def test_pixel_structure():
    expected = BinaryOperation(
        BinaryOperation(CoordinateX(), Operator.EQUAL, Number(3)),
        Operator.AND,
        BinaryOperation(CoordinateY(), Operator.EQUAL, Number(5)),
    )
    assert shapes.pixel(Point(3, 5)) == expected


def test_pixel_matches_exact_point():
    expression = shapes.pixel(Point(3, 5))
    points = [(3, 5), (3, 4), (2, 5), (0, 0)]
    assert inside(expression, points) == [True, False, False, False]


def test_rectangle_matches_interior():
    expression = shapes.rectangle(Point(1, 1), Point(5, 5))
    points = [(2, 2), (3, 4), (1, 1), (5, 5), (0, 3), (3, 6)]
    assert inside(expression, points) == [True, True, False, False, False, False]


def test_rectangle_swapped_points():
    expression = shapes.rectangle(Point(5, 5), Point(1, 1))
    points = [(2, 2), (3, 4), (1, 1), (5, 5)]
    assert inside(expression, points) == [True, True, False, False]


def test_rectangle_is_symmetric_in_corners():
    assert shapes.rectangle(Point(5, 1), Point(1, 5)) == shapes.rectangle(
        Point(1, 5), Point(5, 1)
    )


def test_circle_matches_interior():
    expression = shapes.circle(Point(8, 8), 4)
    points = [(8, 8), (9, 8), (8, 10), (8, 12), (12, 8), (0, 0)]
    assert inside(expression, points) == [True, True, True, False, False, False]


def test_circle_large_radius():
    expression = shapes.circle(Point(5, 5), 65536)
    assert inside(expression, [(5, 5)]) == [True]


def test_line_horizontal():
    expression = shapes.line(Point(2, 5), Point(7, 5))
    points = [(2, 5), (4, 5), (7, 5), (1, 5), (8, 5), (4, 4)]
    assert inside(expression, points) == [True, True, True, False, False, False]


def test_line_vertical():
    expression = shapes.line(Point(3, 1), Point(3, 6))
    points = [(3, 1), (3, 4), (3, 6), (3, 0), (3, 7), (2, 4)]
    assert inside(expression, points) == [True, True, True, False, False, False]


def test_line_diagonal():
    expression = shapes.line(Point(0, 0), Point(8, 8))
    points = [(0, 0), (4, 4), (8, 8), (1, 2), (9, 9)]
    assert inside(expression, points) == [True, True, True, False, False]


def test_line_single_point():
    expression = shapes.line(Point(3, 5), Point(3, 5))
    points = [(3, 5), (3, 4), (2, 5)]
    assert inside(expression, points) == [True, False, False]
    assert expression == shapes.pixel(Point(3, 5))


def test_triangle_matches_interior():
    expression = shapes.triangle(Point(0, 0), Point(10, 0), Point(5, 10))
    points = [(5, 3), (5, 1), (0, 0), (0, 10), (10, 10)]
    assert inside(expression, points) == [True, True, False, False, False]


def test_triangle_vertex_order_does_not_matter():
    clockwise = shapes.triangle(Point(0, 0), Point(10, 0), Point(5, 10))
    counter = shapes.triangle(Point(0, 0), Point(5, 10), Point(10, 0))
    grid = [(x, y) for x in range(12) for y in range(12)]
    assert inside(clockwise, grid) == inside(counter, grid)
    assert inside(clockwise, [(5, 3)]) == [True]