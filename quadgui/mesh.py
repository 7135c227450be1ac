"""Rasterise draw commands into vertex and index lists ready for the GPU."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from quadgui.cursor import Rect, Vec2
from quadgui.painter import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    estimate_triangles_budget,
)
from quadgui.style import Color, RectOffset

MAX_VERTICES = 8000
MAX_INDICES = 4000

_F32_EPSILON = 1.1920929e-07
_UV_WHOLE = Rect(0.0, 0.0, 1.0, 1.0)
_WHITE = Color(1.0, 1.0, 1.0, 1.0)

Position = tuple[float, float, float]
TexCoord = tuple[float, float]
RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex: position, texture coordinate and colour."""

    pos: Position
    uv: TexCoord
    color: RGBA

    @classmethod
    def at(cls, x: float, y: float, u: float, v: float, color: Color) -> Vertex:
        """A vertex on the z = 0 plane."""
        return cls((x, y, 0.0), (u, v), tuple(color))

    def as_tuple(self) -> tuple[Position, TexCoord, RGBA]:
        """The vertex as plain (pos, uv, color) tuples."""
        return (self.pos, self.uv, self.color)


@dataclass
class DrawList:
    """A batch of triangles sharing one clipping zone and one texture."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Rect | None = None
    texture: Any = None

    def _append(self, vertices: list[Vertex], indices: list[int]) -> None:
        base = len(self.vertices)
        self.vertices.extend(vertices)
        self.indices.extend(index + base for index in indices)

    def clear(self) -> None:
        """Drop the geometry and the clipping zone; the texture stays."""
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """A one-pixel outline of ``rect``."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_sprite(
        self,
        rect: Rect,
        src: Rect,
        offsets: RectOffset,
        uv_offsets: RectOffset,
        color: Color,
    ) -> None:
        """A nine-patch: a 4x4 grid of vertices and nine quads."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        left, right, top = offsets.left, offsets.right, offsets.top

        xs = (x, x + left, x + w - right, x + w)
        ys = (y, y + top, y + h - top, y + h)
        us = (
            src.x,
            src.x + uv_offsets.left,
            src.x + src.w - uv_offsets.right,
            src.x + src.w,
        )
        vs = (
            src.y,
            src.y + uv_offsets.top,
            src.y + src.h - uv_offsets.bottom,
            src.y + src.h,
        )

        rgba = tuple(color)
        vertices = [
            Vertex((px, py, 0.0), (u, v), rgba)
            for px, u in zip(xs, us)
            for py, v in zip(ys, vs)
        ]

        indices: list[int] = []
        for row in range(3):
            for column in range(3):
                corner = row * 4 + column
                indices += [corner, corner + 1, corner + 4]
                indices += [corner + 1, corner + 4, corner + 5]

        self._append(vertices, indices)

    def draw_rectangle(self, rect: Rect, src: Rect, color: Color) -> None:
        """A filled quad mapping ``rect`` to the texture region ``src``."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = [
            Vertex.at(x, y, src.x, src.y, color),
            Vertex.at(x + w, y, src.x + src.w, src.y, color),
            Vertex.at(x + w, y + h, src.x + src.w, src.y + src.h, color),
            Vertex.at(x, y + h, src.x, src.y + src.h, color),
        ]
        self._append(vertices, [0, 1, 2, 0, 2, 3])

    def draw_triangle(
        self, p0: Vec2, p1: Vec2, p2: Vec2, source: Rect, color: Color
    ) -> None:
        vertices = [
            Vertex.at(p.x, p.y, source.x, source.y, color) for p in (p0, p1, p2)
        ]
        self._append(vertices, [0, 1, 2])

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """A line as a quad of the given thickness; degenerate lines draw nothing."""
        nx = -(y2 - y1)
        ny = x2 - x1
        length = math.sqrt(nx * nx + ny * ny)
        half = thickness * 0.5
        if half != 0.0:
            tlen = length / half
        elif length == 0.0 or math.isnan(length):
            tlen = math.nan
        else:
            tlen = math.copysign(math.inf, half) * length
        if tlen < _F32_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen

        vertices = [
            Vertex.at(x1 + tx, y1 + ty, source.x, source.y, color),
            Vertex.at(x1 - tx, y1 - ty, source.x, source.y, color),
            Vertex.at(x2 + tx, y2 + ty, source.x, source.y, color),
            Vertex.at(x2 - tx, y2 - ty, source.x, source.y, color),
        ]
        self._append(vertices, [0, 1, 2, 2, 1, 3])


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())

    last = draw_lists[-1]
    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture is not None and last.texture != command.texture:
            draw_lists.append(
                DrawList(texture=command.texture, clipping_zone=last.clipping_zone)
            )
    else:
        vertices, indices = estimate_triangles_budget(command)
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))
    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> None:
    """Append the geometry of ``command`` to ``draw_lists``, starting new lists as needed."""
    active = _active_draw_list(draw_lists, command)

    match command:
        case Clip(rect=rect):
            active.clipping_zone = rect
        case DrawRect(rect=rect, source=source, fill=fill, stroke=stroke):
            if fill is not None:
                active.draw_rectangle(rect, source, fill)
            if stroke is not None:
                active.draw_rectangle_lines(rect, source, stroke)
        case DrawSprite(
            rect=rect, source=source, color=color, offsets=offsets, offsets_uv=uv
        ):
            active.draw_sprite(
                rect, source, offsets or RectOffset(), uv or RectOffset(), color
            )
        case DrawLine(start=start, end=end, source=source, color=color):
            active.draw_line(start.x, start.y, end.x, end.y, 1.0, source, color)
        case DrawCharacter(dest=dest, source=source, color=color):
            active.draw_rectangle(dest, source, color)
        case DrawRawTexture(rect=rect):
            active.draw_rectangle(rect, _UV_WHOLE, _WHITE)
        case DrawTriangle(p0=p0, p1=p1, p2=p2, source=source, color=color):
            active.draw_triangle(p0, p1, p2, source, color)
        case _:
            raise TypeError(f"not a draw command: {command!r}")