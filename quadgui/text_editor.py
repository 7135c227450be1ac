"""Text editing state behind an edit box: cursor, selection, clicks and undo."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

DOUBLE_CLICK_TIME = 0.5

_WORD_DELIMITERS = frozenset(' ();"')


def word_delimiter(character: str) -> bool:
    """Whether ``character`` separates words."""
    return character in _WORD_DELIMITERS


def _char_at(text: str, index: int, fallback: str) -> str:
    return text[index] if 0 <= index < len(text) else fallback


class _Command(Protocol):
    def apply(self, cursor: int, text: str) -> tuple[int, str]: ...

    def unapply(self, cursor: int, text: str) -> tuple[int, str]: ...


@dataclass(frozen=True)
class _InsertCharacter:
    character: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text


@dataclass(frozen=True)
class _InsertString:
    data: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.data + text[self.cursor :]
        return self.cursor + len(self.data), text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            end = min(self.cursor + len(self.data), len(text))
            text = text[: self.cursor] + text[end:]
        return self.cursor, text


@dataclass(frozen=True)
class _DeleteCharacter:
    character: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text


@dataclass(frozen=True)
class _DeleteRange:
    start: int
    end: int
    data: str

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        low, high = sorted((self.start, self.end))
        return low, text[:low] + text[high:]

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        low = min(self.start, self.end)
        return low, text[:low] + self.data + text[low:]


class ClickState(enum.Enum):
    """What a held mouse button is currently selecting."""

    NONE = enum.auto()
    SELECTING_CHARS = enum.auto()
    SELECTING_WORDS = enum.auto()
    SELECTING_LINES = enum.auto()
    SELECTED = enum.auto()


@dataclass
class EditboxState:
    """Cursor, selection, mouse clicks and undo history of an edit box.

    The text itself is owned by the caller; methods that edit it take the
    current text and return the edited one.
    """

    cursor: int = 0
    click_state: ClickState = ClickState.NONE
    click_span: tuple[int, int] = (0, 0)
    clicks_counter: int = 0
    current_click: int = 0
    last_click_time: float = 0.0
    last_click: int = 0
    selection: tuple[int, int] | None = None
    _undo_stack: list[_Command] = field(default_factory=list, repr=False)
    _redo_stack: list[_Command] = field(default_factory=list, repr=False)

    def clamp_selection(self, text: str) -> None:
        """Keep the selection inside ``text`` after an outside change."""
        if self.selection is not None:
            start, end = self.selection
            self.selection = (min(start, len(text)), min(end, len(text)))

    def selected_text(self, text: str) -> str | None:
        """The selected part of ``text``, or None without a selection."""
        if self.selection is None:
            return None
        low, high = sorted(self.selection)
        if high > len(text):
            raise IndexError(f"selection {self.selection} lies outside the text")
        return text[low:high]

    def in_selected_range(self, cursor: int) -> bool:
        if self.selection is None:
            return False
        low, high = sorted(self.selection)
        return low <= cursor < high

    def find_line_begin(self, text: str) -> int:
        """Distance from the cursor back to the start of its line."""
        position = self.cursor
        while position > 0 and _char_at(text, position - 1, "x") != "\n":
            position -= 1
        return self.cursor - position

    def find_line_end(self, text: str) -> int:
        """Distance from the cursor forward to the end of its line."""
        position = self.cursor
        while position < len(text) and _char_at(text, position, "x") != "\n":
            position += 1
        return position - self.cursor

    def find_word_begin(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` back to the start of its word."""
        position = cursor
        while position > 0:
            character = _char_at(text, position - 1, " ")
            if word_delimiter(character) or character == "\n":
                break
            position -= 1
        return cursor - position

    def find_word_end(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` past the word and the delimiters after it."""
        position = cursor
        skipping = False
        while position < len(text):
            character = _char_at(text, position, " ")
            if word_delimiter(character) or character == "\n":
                skipping = True
            if skipping and not word_delimiter(character):
                break
            position += 1
        return position - cursor

    def _run(self, command: _Command, text: str) -> str:
        self.cursor, text = command.apply(self.cursor, text)
        self._undo_stack.append(command)
        return text

    def insert_character(self, text: str, character: str) -> str:
        self._redo_stack.clear()
        self.selection = None
        return self._run(_InsertCharacter(character, self.cursor), text)

    def insert_string(self, text: str, string: str) -> str:
        self._redo_stack.clear()
        self.selection = None
        return self._run(_InsertString(string, self.cursor), text)

    def delete_selected(self, text: str) -> str:
        self._redo_stack.clear()
        if self.selection is not None:
            start, end = self.selection
            low, high = sorted(self.selection)
            if high > len(text):
                raise IndexError(f"selection {self.selection} lies outside the text")
            text = self._run(_DeleteRange(start, end, text[low:high]), text)
        self.selection = None
        return text

    def delete_next_character(self, text: str) -> str:
        self._redo_stack.clear()
        if 0 <= self.cursor < len(text):
            text = self._run(_DeleteCharacter(text[self.cursor], self.cursor), text)
        return text

    def delete_current_character(self, text: str) -> str:
        if self.cursor > 0:
            self.cursor -= 1
            text = self.delete_next_character(text)
        return text

    def move_cursor_next_word(self, text: str, shift: bool) -> None:
        next_word = self.find_word_end(text, self.cursor + 1) + 1
        self.move_cursor(text, next_word, shift)

    def move_cursor_prev_word(self, text: str, shift: bool) -> None:
        if self.cursor > 1:
            prev_word = self.find_word_begin(text, self.cursor - 1) + 1
            self.move_cursor(text, -prev_word, shift)

    def move_cursor(self, text: str, dx: int, shift: bool) -> None:
        """Move by ``dx``; moves leaving the text are ignored. Shift selects."""
        start = self.cursor
        end = start
        if 0 <= self.cursor + dx <= len(text):
            end = self.cursor + dx
            self.cursor = end

        if not shift:
            self.selection = None
        elif self.selection is None:
            self.selection = (start, end)
        else:
            self.selection = (self.selection[0], end)

    def move_cursor_within_line(self, text: str, dx: int, shift: bool) -> None:
        """Move right by up to ``dx`` without leaving the current line."""
        if dx < 0:
            raise ValueError("moving left within a line is not supported")
        for _ in range(dx):
            if _char_at(text, self.cursor, "x") == "\n" or self.cursor == len(text):
                break
            self.move_cursor(text, 1, shift)

    def select_all(self, text: str) -> None:
        self.selection = (0, len(text))
        self.click_state = ClickState.NONE

    def deselect(self) -> None:
        self.click_state = ClickState.NONE
        self.selection = None

    def select_word(self, text: str) -> tuple[int, int]:
        begin = self.cursor - self.find_word_begin(text, self.cursor)
        end = self.cursor + self.find_word_end(text, self.cursor)
        self.selection = (begin, end)
        return self.selection

    def select_line(self, text: str) -> tuple[int, int]:
        begin = self.cursor - self.find_line_begin(text)
        end = self.cursor + self.find_line_end(text)
        self.selection = (begin, end)
        return self.selection

    def click_down(self, time: float, text: str, cursor: int) -> None:
        """Mouse pressed over ``cursor``; repeated clicks select words, then lines."""
        self.current_click = cursor

        if (
            self.last_click == self.current_click
            and time - self.last_click_time < DOUBLE_CLICK_TIME
        ):
            self.clicks_counter += 1
            phase = self.clicks_counter % 3
            if phase == 0:
                self.deselect()
            elif phase == 1:
                self.click_span = self.select_word(text)
                self.click_state = ClickState.SELECTING_WORDS
            else:
                self.click_span = self.select_line(text)
                self.click_state = ClickState.SELECTING_LINES
        else:
            self.clicks_counter = 0
            if self.click_state in (ClickState.NONE, ClickState.SELECTED):
                self.click_state = ClickState.SELECTING_CHARS
                self.click_span = (cursor, cursor)
                self.selection = (cursor, cursor)
            else:
                self.click_state = ClickState.NONE
                self.selection = None
                self.cursor = cursor

        self.last_click_time = time

    def click_move(self, text: str, cursor: int) -> None:
        """Mouse held over ``cursor``: extend the selection being made."""
        self.cursor = cursor
        if self.cursor != self.last_click:
            self.clicks_counter = 0

        low, high = self.click_span
        if self.click_state is ClickState.SELECTING_CHARS:
            self.selection = (low, cursor)
        elif self.click_state is ClickState.SELECTING_WORDS:
            if cursor < low:
                word_begin = self.cursor - self.find_word_begin(text, self.cursor)
                self.selection = (word_begin, high)
                self.cursor = word_begin
            elif cursor > high:
                word_end = self.cursor + self.find_word_end(text, self.cursor)
                self.selection = (low, word_end)
                self.cursor = word_end
            else:
                self.selection = (low, high)
                self.cursor = high
        elif self.click_state is ClickState.SELECTING_LINES:
            if cursor < low:
                line_begin = self.cursor - self.find_line_begin(text)
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (line_begin, high)
                self.cursor = line_end
            elif cursor > high:
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (low, line_end)
                self.cursor = line_end
            else:
                self.selection = (low, high)
                self.cursor = high

        self.last_click = cursor

    def click_up(self, text: str) -> None:
        """Mouse released: keep a non-empty selection, drop an empty one."""
        self.click_state = ClickState.NONE
        if self.selection is not None:
            start, end = self.selection
            if start != end:
                self.click_state = ClickState.SELECTED
            else:
                self.selection = None

    def undo(self, text: str) -> str:
        if self._undo_stack:
            command = self._undo_stack.pop()
            self.cursor, text = command.unapply(self.cursor, text)
            self._redo_stack.append(command)
        return text

    def redo(self, text: str) -> str:
        if self._redo_stack:
            command = self._redo_stack.pop()
            self.cursor, text = command.apply(self.cursor, text)
            self._undo_stack.append(command)
        return text