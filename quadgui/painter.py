"""Turn drawing primitives into draw commands, honouring the clipping zone."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Union

from quadgui.cursor import Rect, Vec2
from quadgui.style import Color, RectOffset


@dataclass(frozen=True)
class DrawCharacter:
    """A glyph copied from the atlas region ``source`` to ``dest``."""

    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        return replace(self, dest=self.dest.offset(offset))


@dataclass(frozen=True)
class DrawRect:
    """A rectangle with an optional fill and an optional one-pixel outline."""

    rect: Rect
    source: Rect
    fill: Color | None = None
    stroke: Color | None = None

    def offset(self, offset: Vec2) -> DrawRect:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawSprite:
    """A nine-patch sprite; ``offsets`` are the unscaled border widths."""

    rect: Rect
    source: Rect
    color: Color
    offsets: RectOffset | None = None
    offsets_uv: RectOffset | None = None

    def offset(self, offset: Vec2) -> DrawSprite:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawTriangle:
    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        return replace(
            self, p0=self.p0 + offset, p1=self.p1 + offset, p2=self.p2 + offset
        )


@dataclass(frozen=True)
class DrawLine:
    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        return replace(self, start=self.start + offset, end=self.end + offset)


@dataclass(frozen=True)
class DrawRawTexture:
    """A whole texture stretched over ``rect``."""

    rect: Rect
    texture: Any

    def offset(self, offset: Vec2) -> DrawRawTexture:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class Clip:
    """Set the clipping zone for the following commands; None disables it."""

    rect: Rect | None = None

    def offset(self, offset: Vec2) -> Clip:
        if self.rect is None:
            return self
        return Clip(self.rect.offset(offset))


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]

_BUDGETED = (DrawCharacter, DrawRawTexture, DrawRect, DrawLine, DrawTriangle)


def estimate_triangles_budget(command: DrawCommand) -> tuple[int, int]:
    """Rough (vertices, indices) reservation a command needs in a draw list."""
    if isinstance(command, _BUDGETED):
        return (10, 10)
    return (0, 0)


class Alignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class LabelParams:
    """Colour and alignment used to draw a label."""

    color: Color = Color(0.0, 0.0, 0.0, 1.0)
    alignment: Alignment = Alignment.LEFT


@dataclass
class Painter:
    """Collects draw commands, dropping those outside the clipping zone.

    ``white_source`` is the atlas region of a plain white pixel used by untextured
    primitives; ``atlas_size`` converts sprite margins to texture coordinates;
    ``dpi_scale`` scales the clipping zones emitted as commands.
    """

    white_source: Rect
    atlas_size: tuple[float, float] = (1.0, 1.0)
    dpi_scale: float = 1.0
    commands: list[DrawCommand] = field(default_factory=list)
    clipping_zone: Rect | None = None

    def clear(self) -> None:
        """Drop all commands and the clipping zone."""
        self.commands.clear()
        self.clipping_zone = None

    def _clipped_out(self, rect: Rect) -> bool:
        return self.clipping_zone is not None and not self.clipping_zone.overlaps(rect)

    def _points_clipped_out(self, *points: Vec2) -> bool:
        zone = self.clipping_zone
        return zone is not None and not any(zone.contains(p) for p in points)

    def draw_raw_texture(self, rect: Rect, texture: Any) -> None:
        if self._clipped_out(rect):
            return
        self.commands.append(DrawRawTexture(rect, texture))

    def draw_rect(
        self, rect: Rect, stroke: Color | None = None, fill: Color | None = None
    ) -> None:
        if self._clipped_out(rect):
            return
        self.commands.append(
            DrawRect(rect=rect, source=self.white_source, fill=fill, stroke=stroke)
        )

    def draw_sprite(
        self,
        rect: Rect,
        source: Rect,
        color: Color,
        margin: RectOffset | None = None,
    ) -> None:
        """Draw the atlas region ``source`` as a nine-patch over ``rect``."""
        if self._clipped_out(rect):
            return
        offsets_uv = None
        if margin is not None:
            width, height = self.atlas_size
            offsets_uv = RectOffset(
                left=margin.left / width,
                right=margin.right / width,
                top=margin.top / height,
                bottom=margin.bottom / height,
            )
        self.commands.append(
            DrawSprite(
                rect=rect,
                source=source,
                color=color,
                offsets=margin,
                offsets_uv=offsets_uv,
            )
        )

    def draw_triangle(self, p0: Vec2, p1: Vec2, p2: Vec2, color: Color) -> None:
        if self._points_clipped_out(p0, p1, p2):
            return
        self.commands.append(DrawTriangle(p0, p1, p2, self.white_source, color))

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        if self._points_clipped_out(start, end):
            return
        self.commands.append(DrawLine(start, end, self.white_source, color))

    def clip(self, rect: Rect | None) -> None:
        """Narrow the clipping zone to ``rect`` (or clear it) and emit a Clip."""
        if rect is None:
            self.clipping_zone = None
        elif self.clipping_zone is None:
            self.clipping_zone = rect
        else:
            self.clipping_zone = self.clipping_zone.intersect(rect) or rect

        scaled = None
        if self.clipping_zone is not None:
            zone, dpi = self.clipping_zone, self.dpi_scale
            scaled = Rect(zone.x * dpi, zone.y * dpi, zone.w * dpi, zone.h * dpi)
        self.commands.append(Clip(scaled))