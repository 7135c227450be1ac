"""Colours, margins and widget styles resolved against an element's state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Hashable


def _to_u8(value: float) -> int:
    """Saturating float-to-byte conversion: truncates, clamps, NaN becomes 0."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the 0..1 range."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 0..255 byte channels."""
        for channel in (r, g, b, a):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"colour channel must be an int, got {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def __iter__(self):
        yield from (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class RectOffset:
    """Distances from each edge of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    def __add__(self, other: RectOffset) -> RectOffset:
        return RectOffset(
            self.left + other.left,
            self.right + other.right,
            self.top + other.top,
            self.bottom + other.bottom,
        )


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget for the current frame."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


_BLACK = Color(0.0, 0.0, 0.0, 1.0)
_WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass
class Style:
    """How one kind of widget looks in each interaction state.

    ``background_margin`` is the part of the background image that is not
    scaled (useful for borders); ``margin`` is extra space around content that
    does not affect textures and may be negative.
    """

    font: Any = None
    background: Hashable | None = None
    background_hovered: Hashable | None = None
    background_clicked: Hashable | None = None
    color: Color = _WHITE
    color_inactive: Color | None = None
    color_hovered: Color = _WHITE
    color_clicked: Color = _WHITE
    color_selected: Color = _WHITE
    color_selected_hovered: Color = _WHITE
    background_margin: RectOffset | None = None
    margin: RectOffset | None = None
    text_color: Color = _BLACK
    text_color_hovered: Color = _BLACK
    text_color_clicked: Color = _BLACK
    font_size: int = 16
    reverse_background_z: bool = False
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    def border_margin(self) -> RectOffset:
        """Background margin and content margin added together."""
        return (self.background_margin or RectOffset()) + (self.margin or RectOffset())

    def text_color_for(self, state: ElementState) -> Color:
        """Text colour for ``state``; unfocused idle text is dimmed."""
        if state.clicked:
            return self.text_color_clicked
        if state.hovered:
            return self.text_color_hovered
        if state.focused:
            return self.text_color
        base = self.text_color
        return Color(base.r * 0.6, base.g * 0.6, base.b * 0.6, base.a * 0.6)

    def color_for(self, state: ElementState) -> Color:
        """Body colour for ``state``."""
        if not state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            base = self.color
            return Color.from_rgba(
                _to_u8(base.r * 255.0),
                _to_u8(base.g * 255.0),
                _to_u8(base.b * 255.0),
                _to_u8(base.a * 255.0 * 0.8),
            )
        if state.clicked:
            return self.color_clicked
        if state.selected and state.hovered:
            return self.color_selected_hovered
        if state.selected:
            return self.color_selected
        if state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, state: ElementState) -> Hashable | None:
        """Background sprite for ``state``, falling back to the plain one."""
        if state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background