"""Builds boolean conditions that describe shapes on the grid."""

from __future__ import annotations

from .syntax import (
    BinaryOperation,
    CoordinateX,
    CoordinateY,
    Expression,
    Number,
    Operator,
    Point,
)

_X = CoordinateX()
_Y = CoordinateY()


def _binary(left: Expression, operator: Operator, right: Expression) -> Expression:
    return BinaryOperation(left, operator, right)


def _and(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.AND, right)


def _equal(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.EQUAL, right)


def _less(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.LESS_THAN, right)


def _greater(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.GREATER_THAN, right)


def _at_least(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.GREATER_THAN_OR_EQUAL, right)


def _at_most(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.LESS_THAN_OR_EQUAL, right)


def _subtract(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.SUBTRACT, right)


def _multiply(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.MULTIPLY, right)


def _add(left: Expression, right: Expression) -> Expression:
    return _binary(left, Operator.ADD, right)


def _power(base: Expression, exponent: Expression) -> Expression:
    return _binary(base, Operator.POWER, exponent)


def _point_condition(point: Point) -> Expression:
    return _and(_equal(_X, Number(point.x)), _equal(_Y, Number(point.y)))


def _inclusive_box(start: Point, end: Point) -> Expression:
    return _and(
        _and(
            _at_least(_X, Number(min(start.x, end.x))),
            _at_most(_X, Number(max(start.x, end.x))),
        ),
        _and(
            _at_least(_Y, Number(min(start.y, end.y))),
            _at_most(_Y, Number(max(start.y, end.y))),
        ),
    )


def pixel(point: Point) -> Expression:
    """``x = px and y = py``"""
    return _point_condition(point)


def rectangle(start: Point, end: Point) -> Expression:
    """``x > x1 and x < x2 and y > y1 and y < y2`` with corners ordered."""
    return _and(
        _and(
            _greater(_X, Number(min(start.x, end.x))),
            _less(_X, Number(max(start.x, end.x))),
        ),
        _and(
            _greater(_Y, Number(min(start.y, end.y))),
            _less(_Y, Number(max(start.y, end.y))),
        ),
    )


def circle(center: Point, radius: int) -> Expression:
    """``(x - cx)^2 + (y - cy)^2 < r^2``"""
    horizontal = _power(_subtract(_X, Number(center.x)), Number(2))
    vertical = _power(_subtract(_Y, Number(center.y)), Number(2))
    return _less(_add(horizontal, vertical), _power(Number(radius), Number(2)))


def _cross_product_expression(start: Point, end: Point) -> Expression:
    return _subtract(
        _multiply(
            _subtract(Number(end.x), Number(start.x)),
            _subtract(_Y, Number(start.y)),
        ),
        _multiply(
            _subtract(Number(end.y), Number(start.y)),
            _subtract(_X, Number(start.x)),
        ),
    )


def _cross_product_value(start: Point, end: Point, point: Point) -> int:
    return (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (point.x - start.x)


def _edge_condition(start: Point, end: Point, reference: Point) -> Expression:
    cross = _cross_product_expression(start, end)
    side = _cross_product_value(start, end, reference)
    if side > 0:
        return _greater(cross, Number(0))
    if side < 0:
        return _less(cross, Number(0))
    # Degenerate triangle: keep points lying on the edge.
    return _equal(cross, Number(0))


def triangle(first: Point, second: Point, third: Point) -> Expression:
    """Points strictly on the same side of every edge as the opposite vertex."""
    return _and(
        _and(
            _edge_condition(first, second, third),
            _edge_condition(second, third, first),
        ),
        _edge_condition(third, first, second),
    )


def line(start: Point, end: Point) -> Expression:
    """Points on the segment from ``start`` to ``end``, endpoints included."""
    horizontal_delta = end.x - start.x
    vertical_delta = end.y - start.y

    if horizontal_delta == 0 and vertical_delta == 0:
        return _point_condition(start)
    if vertical_delta == 0:
        return _and(
            _equal(_Y, Number(start.y)),
            _and(
                _at_least(_X, Number(min(start.x, end.x))),
                _at_most(_X, Number(max(start.x, end.x))),
            ),
        )
    if horizontal_delta == 0:
        return _and(
            _equal(_X, Number(start.x)),
            _and(
                _at_least(_Y, Number(min(start.y, end.y))),
                _at_most(_Y, Number(max(start.y, end.y))),
            ),
        )
    return _and(
        _equal(_cross_product_expression(start, end), Number(0)),
        _inclusive_box(start, end),
    )