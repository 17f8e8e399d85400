"""A small pixel-art language: lexing, evaluation, shapes, colours, export and completion."""

__version__ = "0.1.0"