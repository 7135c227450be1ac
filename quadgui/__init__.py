"""Immediate-mode GUI building blocks: layout, input, styles, draw commands, meshes and text editing."""

__version__ = "0.1.0"