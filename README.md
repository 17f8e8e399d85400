# pixlang

`pixlang` is a toolkit for a small language for drawing pixel art. A drawing
is a grid plus statements that fill it: boolean conditions over `x` and `y`,
shapes such as pixels, lines, rectangles, triangles and circles, named colour
palettes, layers, mirrors and animation frames. Rendered grids can be written
out as PNG, WebP, SVG or an animated GIF.

This package provides:

- a lexer that turns source text into tokens (`pixlang.lexer`, `pixlang.tokens`);
- the syntax tree types (`pixlang.syntax`) and the evaluated instruction set
  (`pixlang.instructions`);
- shape conditions built as expressions over the grid coordinates
  (`pixlang.shapes`);
- an evaluator that type-checks and validates programs (`pixlang.evaluator`);
- colour parsing and palettes (`pixlang.palette`);
- image export of rendered grids to PNG, WebP, SVG and GIF (`pixlang.exporter`);
- keyword and snippet completion for editors, and a language server that
  speaks the Language Server Protocol over standard input and output
  (`pixlang.completion`, `pixlang.server`).

## Installation

```
pip install pixlang
```

Pillow is the only runtime dependency; it is used for raster and GIF export.

## What the language looks like

```
grid 16 by 16

color {
    warm: #e84a00
    cold: #0044e8
}

draw x = y with color warm
circle (8, 8) radius 5 with color cold
line (0, 15) to (15, 0) with #fff

export "sprite" in png scale 8
```

Comments start with `//` and run to the end of the line. Hexadecimal colours
take 3, 6 or 8 digits; the 8-digit form carries an alpha channel. Numbers are
unsigned and must fit in 32 bits.

## Tokenizing

```python
from pixlang.lexer import LexerError, tokenize

tokens = tokenize("grid 16 by 16")
for token in tokens:
    print(token.kind, token.text, token.position.line, token.position.column)

try:
    tokenize("#FF")
except LexerError as error:
    print(error)
    # [ERROR] Hexadecimal color '#FF' must have 3, 6, or 8 digits at line 1, column 1
```

`Lexer(source).tokenize()` does the same as `tokenize(source)`. Literal tokens
carry their payload in `Token.value`: the integer of a number, the digits of a
colour, the content of a string or the name of an identifier.

## Evaluating expressions and programs

Expressions are evaluated at a grid position and give an `int` or a `bool`.
Arithmetic is on 64-bit signed integers; division truncates towards zero.
Division by zero, negative exponents, overflow and type mismatches raise
`EvaluateError`.

```python
from pixlang.evaluator import evaluate, evaluate_expression, type_of_expression
from pixlang.syntax import (
    BinaryOperation, CoordinateX, DrawStatement, GridStatement,
    HexadecimalColor, Number, Operator, Program,
)

condition = BinaryOperation(CoordinateX(), Operator.LESS_THAN, Number(5))
print(evaluate_expression(condition, 3, 0))  # True
print(type_of_expression(condition))         # ValueType.BOOLEAN

program = Program([
    GridStatement(10, 10),
    DrawStatement(condition, HexadecimalColor("FF0000")),
])
evaluated = evaluate(program)
print(evaluated.grid_width, evaluated.grid_height, len(evaluated.instructions))
```

`evaluate` requires exactly one top-level `grid` statement with non-zero
dimensions, draw and erase conditions that are boolean, no `grid` inside a
layer or mirror block, and unique layer names. Shape statements become
instructions that carry their shape condition.

## Shapes

Each shape in `pixlang.shapes` is a boolean expression over `x` and `y`, so it
can be evaluated like any other condition:

```python
from pixlang import shapes
from pixlang.evaluator import evaluate_expression
from pixlang.syntax import Point

disc = shapes.circle(Point(8, 8), 4)
print(evaluate_expression(disc, 9, 8))  # True
```

`pixel` matches one point and `line` includes both endpoints. `rectangle`,
`circle` and `triangle` match the strict interior only; a degenerate triangle
keeps the points lying on its collapsed edge.

## Colours

```python
from pixlang.palette import parse_hexadecimal

print(parse_hexadecimal("F00"))       # Color(red=255, green=0, blue=0, alpha=255)
print(parse_hexadecimal("FF000080"))  # alpha 128
```

`build_palette` collects named colours from top-level `ColorBlock`
instructions, and `resolve_color` turns a `HexadecimalColor` or `NamedColor`
into a `Color`, raising `ColorError` for unknown names or malformed digits.

## Export

`pixlang.exporter.export(result, instructions)` carries out every `Export`
instruction using a `RenderResult` (a `Grid`, plus animation `Frame`s and
`NamedLayer`s). Filenames get the format's extension appended; `scale`
enlarges each pixel into a square block. Exports inside a `Layer` use that
layer's grid. WebP is written lossless. GIF export needs at least one frame,
uses each frame's delay in milliseconds and loops forever. SVG export writes
one `<rect>` per filled pixel, with `fill-opacity` for translucent colours,
and one `<g>` group per named layer. Failures raise `ExportError`.

## Editor completion

```python
from pixlang.completion import complete

items = complete("grid 5 by 5\ncircle (2, 2) ", 2, 15)
print([item.to_dict() for item in items])
# [{'label': 'radius', 'kind': 'Keyword'}]
```

Lines and columns start at 1.

## Language server

The `pixlang-server` command runs a language server over standard input and
output. It supports `initialize`, `shutdown`, `exit`,
`textDocument/didOpen`, `textDocument/didChange` (full document sync) and
`textDocument/completion`, with a space as trigger character. The same loop is
available as `pixlang.server.run(reader, writer)` for binary streams.

For one-off completion without the protocol, pass `complete` and send a JSON
request on standard input:

```
echo '{"source": "grid 17 ", "line": 1, "column": 9}' | pixlang-server complete
```

The completion items are printed as a JSON array on standard output.

## What this package does not do

There is no parser here: tokens cannot be turned into a `Program`, so
programs are built directly from the `pixlang.syntax` types. There is also no
renderer: instructions are not drawn onto a grid, so a `RenderResult` for
`export` has to be assembled by hand. Consequently there is no command that
reads a drawing file and writes images; the only command is the language
server.

## Running the tests

```
pip install -e ".[test]"
pytest
```