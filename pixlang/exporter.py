"""Writes rendered grids to PNG, WebP, SVG and animated GIF files."""

from __future__ import annotations

import io
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import Image

from .instructions import Export, Instruction, Layer
from .palette import Color
from .syntax import Format


class ExportError(Exception):
    """Raised when an image cannot be encoded or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Grid:
    """A rendered canvas: rows of colors, ``None`` where nothing is drawn."""

    width: int
    height: int
    pixels: list[list[Optional[Color]]]


@dataclass
class Frame:
    """One frame of an animation and its delay in milliseconds."""

    grid: Grid
    delay: int


@dataclass
class NamedLayer:
    """The canvas of a named layer."""

    name: str
    grid: Grid


@dataclass
class RenderResult:
    """Everything the renderer produced for a program."""

    grid: Grid
    frames: list[Frame] = field(default_factory=list)
    layers: list[NamedLayer] = field(default_factory=list)
    has_frames: bool = False
    has_animated_export: bool = False


_RASTER_FORMATS = {
    Format.PNG: ("PNG", "png", {}),
    Format.WEBP: ("WEBP", "webp", {"lossless": True}),
}


def export(result: RenderResult, instructions: Iterable[Instruction]) -> None:
    """Carry out every export instruction, including those inside layers."""
    _export_instructions(instructions, result.grid, result.frames, result.layers)


def _export_instructions(
    instructions: Iterable[Instruction],
    grid: Grid,
    frames: Sequence[Frame],
    layers: Sequence[NamedLayer],
) -> None:
    for instruction in instructions:
        if isinstance(instruction, Export):
            scale = 1 if instruction.scale is None else instruction.scale
            if instruction.format in _RASTER_FORMATS:
                _export_raster(grid, instruction.filename, scale, instruction.format)
            elif instruction.format is Format.SVG:
                _export_svg(grid, instruction.filename, scale, layers)
            elif instruction.format is Format.GIF:
                _export_gif(frames, instruction.filename, scale)
        elif isinstance(instruction, Layer):
            named = next((layer for layer in layers if layer.name == instruction.name), None)
            if named is not None:
                _export_instructions(instruction.instructions, named.grid, frames, layers)


def _grid_to_image(grid: Grid, scale: int) -> Image.Image:
    if scale == 0:
        return Image.new("RGBA", (0, 0))
    data = bytearray()
    for row in grid.pixels[: grid.height]:
        for color in row[: grid.width]:
            if color is None:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes((color.red, color.green, color.blue, color.alpha))
    image = Image.frombytes("RGBA", (grid.width, grid.height), bytes(data))
    if scale != 1:
        image = image.resize((grid.width * scale, grid.height * scale), Image.NEAREST)
    return image


def _write(output_filename: str, content: bytes | str) -> None:
    path = Path(output_filename)
    try:
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
    except OSError as error:
        raise ExportError(f"failed to save '{output_filename}': {error}") from error


def _export_raster(grid: Grid, filename: str, scale: int, file_format: Format) -> None:
    pillow_format, extension, options = _RASTER_FORMATS[file_format]
    output_filename = f"{filename}.{extension}"
    buffer = io.BytesIO()
    try:
        _grid_to_image(grid, scale).save(buffer, format=pillow_format, **options)
    except (OSError, ValueError, SystemError) as error:
        raise ExportError(f"failed to encode '{output_filename}': {error}") from error
    _write(output_filename, buffer.getvalue())


def _export_gif(frames: Sequence[Frame], filename: str, scale: int) -> None:
    if not frames:
        raise ExportError("no frames to export as gif")

    output_filename = f"{filename}.gif"
    buffer = io.BytesIO()
    try:
        images = [_grid_to_image(frame.grid, scale) for frame in frames]
        images[0].save(
            buffer,
            format="GIF",
            save_all=True,
            append_images=images[1:],
            duration=[frame.delay for frame in frames],
            loop=0,
            disposal=2,
        )
    except (OSError, ValueError, SystemError) as error:
        raise ExportError(f"failed to encode gif frame: {error}") from error
    _write(output_filename, buffer.getvalue())


def _export_svg(grid: Grid, filename: str, scale: int, layers: Sequence[NamedLayer]) -> None:
    pixel_size = max(scale, 1)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{grid.width * pixel_size}" '
        f'height="{grid.height * pixel_size}" shape-rendering="crispEdges">\n'
    ]

    if not layers:
        lines.extend(_svg_pixels(grid, pixel_size, "  "))
    else:
        for layer in layers:
            lines.append(f'  <g id="{layer.name}">\n')
            lines.extend(_svg_pixels(layer.grid, pixel_size, "    "))
            lines.append("  </g>\n")

    lines.append("</svg>\n")
    _write(f"{filename}.svg", "".join(lines))


def _svg_pixels(grid: Grid, pixel_size: int, indent: str) -> Iterable[str]:
    for y, row in enumerate(grid.pixels[: grid.height]):
        for x, color in enumerate(row[: grid.width]):
            if color is None:
                continue
            rect = (
                f'{indent}<rect x="{x * pixel_size}" y="{y * pixel_size}" '
                f'width="{pixel_size}" height="{pixel_size}" '
                f'fill="#{color.red:02x}{color.green:02x}{color.blue:02x}"'
            )
            if color.alpha == 255:
                yield rect + "/>\n"
            else:
                yield rect + f' fill-opacity="{color.alpha / 255:.3f}"/>\n'