"""Per-frame input state, key repeat emulation and clipboard storage."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from quadgui.cursor import Vec2


class KeyCode(enum.Enum):
    """Keys the widgets react to."""

    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    ENTER = enum.auto()
    TAB = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    CONTROL = enum.auto()
    ESCAPE = enum.auto()
    A = enum.auto()  # select all
    Z = enum.auto()  # undo
    Y = enum.auto()  # redo
    C = enum.auto()  # copy
    V = enum.auto()  # paste
    X = enum.auto()  # cut


@dataclass(frozen=True)
class InputCharacter:
    """A typed character (a one-character string) or a key press."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class Input:
    """Mouse and keyboard state gathered for one frame."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    is_mouse_down: bool = False
    click_down: bool = False
    click_up: bool = False
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    input_buffer: list[InputCharacter] = field(default_factory=list)
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False

    def _usable(self) -> bool:
        return not self.cursor_grabbed and self.window_active

    def mouse_held(self) -> bool:
        """Mouse button down, unless grabbed or the window is inactive."""
        return self.is_mouse_down and self._usable()

    def clicked_down(self) -> bool:
        """Button pressed this frame, unless grabbed or the window is inactive."""
        return self.click_down and self._usable()

    def clicked_up(self) -> bool:
        """Button released this frame, unless grabbed or the window is inactive."""
        return self.click_up and self._usable()

    def reset(self) -> None:
        """Clear the per-frame events; the mouse position and held state remain."""
        self.modifier_ctrl = False
        self.escape = False
        self.enter = False
        self.click_down = False
        self.click_up = False
        self.mouse_wheel = Vec2(0.0, 0.0)
        self.input_buffer = []
        self.window_active = False


@dataclass
class KeyRepeat:
    """Emulates key auto-repeat: one press, then repeats after a delay."""

    character_this_frame: KeyCode | None = None
    active_character: KeyCode | None = None
    repeating_character: KeyCode | None = None
    pressed_time: float = 0.0

    def add_repeat_gap(self, key: KeyCode, time: float) -> bool:
        """Register ``key`` as held this frame; return whether it should act now."""
        self.character_this_frame = key
        return (
            self.active_character is None
            or self.active_character != key
            or self.repeating_character == key
        )

    def new_frame(self, time: float) -> None:
        """Close the frame, starting repetition for keys held over half a second."""
        this_frame = self.character_this_frame
        self.character_this_frame = None

        if this_frame == self.active_character and time - self.pressed_time > 0.5:
            self.repeating_character = self.active_character

        if this_frame != self.active_character:
            self.active_character = this_frame
            self.pressed_time = time
            self.repeating_character = None


class Clipboard:
    """In-memory clipboard holding at most one string."""

    def __init__(self) -> None:
        self._data: str | None = None

    def get(self) -> str | None:
        return self._data

    def set(self, data: str) -> None:
        self._data = data