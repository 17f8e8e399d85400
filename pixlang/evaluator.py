"""Type checks and evaluates pix programs and expressions."""

from __future__ import annotations

from collections.abc import Iterable

from . import shapes
from .instructions import (
    Circle,
    Clear,
    ColorBlock,
    Copy,
    Draw,
    Erase,
    EvaluatedProgram,
    EvaluateError,
    Export,
    Frame,
    Instruction,
    Layer,
    Line,
    Mirror,
    Move,
    Pixel,
    Rectangle,
    Triangle,
    ValueType,
)
from .syntax import (
    BinaryOperation,
    CircleStatement,
    ClearStatement,
    ColorBlockStatement,
    CoordinateX,
    CoordinateY,
    CopyStatement,
    DrawStatement,
    EraseStatement,
    ExportStatement,
    Expression,
    FrameStatement,
    GridStatement,
    LayerStatement,
    LineStatement,
    MirrorStatement,
    MoveStatement,
    Number,
    Operator,
    PixelStatement,
    Program,
    RectangleStatement,
    Statement,
    TriangleStatement,
    UnaryNot,
)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1

_ARITHMETIC = frozenset(
    {Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE, Operator.POWER}
)
_COMPARISON = frozenset(
    {
        Operator.EQUAL,
        Operator.LESS_THAN,
        Operator.GREATER_THAN,
        Operator.LESS_THAN_OR_EQUAL,
        Operator.GREATER_THAN_OR_EQUAL,
    }
)
_LOGICAL = frozenset({Operator.AND, Operator.OR})

_NOT_MESSAGE = "operator 'not' requires a boolean operand"


def _number_error(operator: Operator) -> EvaluateError:
    return EvaluateError(f"operator '{operator.symbol()}' requires number operands")


def _boolean_error(operator: Operator) -> EvaluateError:
    return EvaluateError(f"operator '{operator.symbol()}' requires boolean operands")


def _expect_number(value: int | bool, operator: Operator) -> int:
    if isinstance(value, bool):
        raise _number_error(operator)
    return value


def _expect_boolean(value: int | bool, operator: Operator) -> bool:
    if not isinstance(value, bool):
        raise _boolean_error(operator)
    return value


def _checked(value: int) -> int:
    if not _I64_MIN <= value <= _I64_MAX:
        raise EvaluateError("arithmetic overflow")
    return value


def _power(base: int, exponent: int) -> int:
    if exponent < 0:
        raise EvaluateError("negative exponent")
    if exponent > _U32_MAX:
        raise EvaluateError("arithmetic overflow")
    if base in (0, 1):
        return base**exponent
    if base == -1:
        return 1 if exponent % 2 == 0 else -1
    if exponent > 63:
        raise EvaluateError("arithmetic overflow")
    return _checked(base**exponent)


def _arithmetic(left: int, operator: Operator, right: int) -> int:
    if operator is Operator.ADD:
        return _checked(left + right)
    if operator is Operator.SUBTRACT:
        return _checked(left - right)
    if operator is Operator.MULTIPLY:
        return _checked(left * right)
    if operator is Operator.DIVIDE:
        if right == 0:
            raise EvaluateError("division by zero")
        quotient = abs(left) // abs(right)
        return _checked(quotient if (left < 0) == (right < 0) else -quotient)
    return _power(left, right)


def _comparison(left: int, operator: Operator, right: int) -> bool:
    if operator is Operator.EQUAL:
        return left == right
    if operator is Operator.LESS_THAN:
        return left < right
    if operator is Operator.GREATER_THAN:
        return left > right
    if operator is Operator.LESS_THAN_OR_EQUAL:
        return left <= right
    return left >= right


def evaluate_expression(expression: Expression, x: int, y: int) -> int | bool:
    """Evaluate ``expression`` at grid position (x, y), giving an int or a bool."""
    match expression:
        case Number(value):
            return value
        case CoordinateX():
            return x
        case CoordinateY():
            return y
        case UnaryNot(operand):
            value = evaluate_expression(operand, x, y)
            if not isinstance(value, bool):
                raise EvaluateError(_NOT_MESSAGE)
            return not value
        case BinaryOperation(left, operator, right):
            left_value = evaluate_expression(left, x, y)
            right_value = evaluate_expression(right, x, y)
            if operator in _ARITHMETIC:
                return _arithmetic(
                    _expect_number(left_value, operator),
                    operator,
                    _expect_number(right_value, operator),
                )
            if operator in _COMPARISON:
                return _comparison(
                    _expect_number(left_value, operator),
                    operator,
                    _expect_number(right_value, operator),
                )
            left_boolean = _expect_boolean(left_value, operator)
            right_boolean = _expect_boolean(right_value, operator)
            if operator is Operator.AND:
                return left_boolean and right_boolean
            return left_boolean or right_boolean
    raise TypeError(f"not an expression: {expression!r}")


def type_of_expression(expression: Expression) -> ValueType:
    """Work out the type of ``expression`` without evaluating it."""
    match expression:
        case Number() | CoordinateX() | CoordinateY():
            return ValueType.NUMBER
        case UnaryNot(operand):
            if type_of_expression(operand) is not ValueType.BOOLEAN:
                raise EvaluateError(_NOT_MESSAGE)
            return ValueType.BOOLEAN
        case BinaryOperation(left, operator, right):
            left_type = type_of_expression(left)
            right_type = type_of_expression(right)
            if operator in _LOGICAL:
                if left_type is not ValueType.BOOLEAN or right_type is not ValueType.BOOLEAN:
                    raise _boolean_error(operator)
                return ValueType.BOOLEAN
            if left_type is not ValueType.NUMBER or right_type is not ValueType.NUMBER:
                raise _number_error(operator)
            return ValueType.NUMBER if operator in _ARITHMETIC else ValueType.BOOLEAN
    raise TypeError(f"not an expression: {expression!r}")


def _require_boolean(condition: Expression, statement_name: str) -> None:
    if type_of_expression(condition) is not ValueType.BOOLEAN:
        raise EvaluateError(f"{statement_name} condition must be a boolean expression")


def _instruction(statement: Statement) -> Instruction:
    match statement:
        case DrawStatement(condition, color):
            _require_boolean(condition, "draw")
            return Draw(condition, color)
        case EraseStatement(condition):
            _require_boolean(condition, "erase")
            return Erase(condition)
        case ClearStatement():
            return Clear()
        case PixelStatement(point, color):
            return Pixel(shapes.pixel(point), point, color)
        case LineStatement(start, end, color):
            return Line(shapes.line(start, end), start, end, color)
        case RectangleStatement(start, end, color):
            return Rectangle(shapes.rectangle(start, end), start, end, color)
        case TriangleStatement(first, second, third, color):
            return Triangle(shapes.triangle(first, second, third), first, second, third, color)
        case CircleStatement(center, radius, color):
            return Circle(shapes.circle(center, radius), center, radius, color)
        case ExportStatement(filename, file_format, scale):
            return Export(filename, file_format, scale)
        case ColorBlockStatement(entries):
            return ColorBlock(entries)
        case FrameStatement(delay):
            return Frame(delay)
        case CopyStatement(start, end, destination):
            return Copy(start, end, destination)
        case MoveStatement(start, end, destination):
            return Move(start, end, destination)
        case LayerStatement(name, statements):
            return Layer(name, _evaluate_block(statements))
        case MirrorStatement(start, end, statements):
            return Mirror(start, end, _evaluate_block(statements))
        case GridStatement():
            raise EvaluateError("grid statement is not allowed inside a block")
    raise TypeError(f"not a statement: {statement!r}")


def _evaluate_block(statements: Iterable[Statement]) -> list[Instruction]:
    return [_instruction(statement) for statement in statements]


def _check_duplicate_layer_names(instructions: Iterable[Instruction], seen: set[str]) -> None:
    for instruction in instructions:
        if isinstance(instruction, Layer):
            if instruction.name in seen:
                raise EvaluateError(f"duplicate layer name '{instruction.name}'")
            seen.add(instruction.name)
            _check_duplicate_layer_names(instruction.instructions, seen)
        elif isinstance(instruction, Mirror):
            _check_duplicate_layer_names(instruction.instructions, seen)


def evaluate(program: Program) -> EvaluatedProgram:
    """Validate ``program`` and turn it into instructions ready for rendering."""
    grid: tuple[int, int] | None = None
    instructions: list[Instruction] = []

    for statement in program.statements:
        if isinstance(statement, GridStatement):
            if grid is not None:
                raise EvaluateError("duplicate grid statement")
            if statement.width == 0 or statement.height == 0:
                raise EvaluateError("grid dimensions must be greater than zero")
            grid = (statement.width, statement.height)
        else:
            instructions.append(_instruction(statement))

    if grid is None:
        raise EvaluateError("missing grid statement")

    _check_duplicate_layer_names(instructions, set())

    width, height = grid
    return EvaluatedProgram(width, height, tuple(instructions))