"""Layout cursor: decides where the next widget is placed inside a window."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def offset(self, offset: Vec2) -> Rect:
        """The same rectangle moved by ``offset``."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside (right and bottom edges excluded)."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles touch or overlap."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def intersect(self, other: Rect) -> Rect | None:
        """The common area of both rectangles, or None when they are apart."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def combine_with(self, other: Rect) -> Rect:
        """The smallest rectangle holding both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right, other.right) - x
        h = max(self.bottom, other.bottom) - y
        return Rect(x, y, w, h)

    def point(self) -> Vec2:
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        return Vec2(self.w, self.h)


@dataclass
class Scroll:
    """Scroll state of a window's content area."""

    scroll: Vec2
    dragging_x: bool
    dragging_y: bool
    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    initial_scroll: Vec2

    def _clamped_y(self, y: float) -> float:
        inner = self.inner_rect_previous_frame
        return min(max(y, inner.y), inner.h - self.rect.h + inner.y)

    def scroll_to(self, y: float) -> None:
        """Scroll vertically to ``y``, kept within the previous frame's content."""
        self.rect = replace(self.rect, y=self._clamped_y(y))

    def update(self) -> None:
        """Clamp the current vertical scroll to the previous frame's content."""
        self.rect = replace(self.rect, y=self._clamped_y(self.rect.y))


class Layout(enum.Enum):
    """How the cursor places the next widget."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class FreeLayout:
    """Place the next widget at an explicit point, relative to the window area."""

    point: Vec2


class Cursor:
    """Tracks where the next widget goes inside a window area."""

    def __init__(self, area: Rect, margin: float) -> None:
        self.margin = margin
        self.x = margin
        self.y = margin
        self.ident = 0.0
        self.start_x = margin
        self.start_y = margin
        whole = Rect(0.0, 0.0, area.w, area.h)
        self.scroll = Scroll(
            scroll=Vec2(0.0, 0.0),
            dragging_x=False,
            dragging_y=False,
            rect=whole,
            inner_rect=whole,
            inner_rect_previous_frame=whole,
            initial_scroll=Vec2(0.0, 0.0),
        )
        self.area = area
        self.next_same_line: float | None = None
        self.max_row_y = 0.0

    def __repr__(self) -> str:
        return (
            f"Cursor(x={self.x!r}, y={self.y!r}, area={self.area!r}, "
            f"margin={self.margin!r})"
        )

    def _to_screen(self, local: Vec2) -> Vec2:
        return (
            local
            + Vec2(self.area.x, self.area.y)
            + self.scroll.scroll
            + Vec2(self.ident, 0.0)
        )

    def reset(self) -> None:
        """Start a new frame: rewind the cursor and roll the content size over."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        """Screen position where the next widget would start."""
        return self._to_screen(Vec2(self.x, self.y))

    def fit(self, size: Vec2, layout: Layout | FreeLayout) -> Vec2:
        """Reserve ``size`` for a widget and return its screen position."""
        if self.next_same_line is not None:
            same_line_x = self.next_same_line
            self.next_same_line = None
            if same_line_x != 0.0:
                self.x = same_line_x
            layout = Layout.HORIZONTAL

        if isinstance(layout, FreeLayout):
            res = layout.point
        elif layout is Layout.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x >= self.area.w - self.margin * 2.0:
                # the extra 1 makes the next vertical widget start a new row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        else:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return self._to_screen(res)