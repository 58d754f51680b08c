"""A minimal multi-line text editor driven by key events."""

from __future__ import annotations

import enum
import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from chatterm.keys import Key, KeyEvent, KeyHandler, Modifier
from chatterm.textbuffer import SELECTION_CHAR, TextBuffer
from chatterm.textutil import calculate_necessary_height

_MENTION_START = re.compile(r"(?<![^ \n])@")
_BACKSPACE_KEYS = (Key.BACKSPACE, Key.BACKSPACE2)
_BORDER_ROWS = 2
_INITIAL_HEIGHT = 3


class EditorAction(enum.Enum):
    """Editing actions a key binding can trigger."""

    MOVE_CURSOR_LEFT = "move_cursor_left"
    EXPAND_SELECTION_TO_LEFT = "expand_selection_to_left"
    MOVE_CURSOR_RIGHT = "move_cursor_right"
    EXPAND_SELECTION_TO_RIGHT = "expand_selection_to_right"
    SELECT_WORD_LEFT = "select_word_left"
    SELECT_WORD_RIGHT = "select_word_right"
    MOVE_CURSOR_WORD_LEFT = "move_cursor_word_left"
    MOVE_CURSOR_WORD_RIGHT = "move_cursor_word_right"
    SELECT_ALL = "select_all"
    DELETE_RIGHT = "delete_right"
    COPY_SELECTION = "copy_selection"
    PASTE_AT_SELECTION = "paste_at_selection"
    INPUT_NEW_LINE = "input_new_line"
    SEND_MESSAGE = "send_message"


_BUFFER_ACTIONS = frozenset(
    {
        EditorAction.MOVE_CURSOR_LEFT,
        EditorAction.EXPAND_SELECTION_TO_LEFT,
        EditorAction.MOVE_CURSOR_RIGHT,
        EditorAction.EXPAND_SELECTION_TO_RIGHT,
        EditorAction.SELECT_WORD_LEFT,
        EditorAction.SELECT_WORD_RIGHT,
        EditorAction.MOVE_CURSOR_WORD_LEFT,
        EditorAction.MOVE_CURSOR_WORD_RIGHT,
        EditorAction.SELECT_ALL,
        EditorAction.DELETE_RIGHT,
    }
)

DEFAULT_BINDINGS: Mapping[KeyEvent, EditorAction] = MappingProxyType(
    {
        KeyEvent(Key.LEFT): EditorAction.MOVE_CURSOR_LEFT,
        KeyEvent(Key.LEFT, modifiers=Modifier.SHIFT): EditorAction.EXPAND_SELECTION_TO_LEFT,
        KeyEvent(Key.RIGHT): EditorAction.MOVE_CURSOR_RIGHT,
        KeyEvent(Key.RIGHT, modifiers=Modifier.SHIFT): EditorAction.EXPAND_SELECTION_TO_RIGHT,
        KeyEvent(Key.LEFT, modifiers=Modifier.CTRL | Modifier.SHIFT): EditorAction.SELECT_WORD_LEFT,
        KeyEvent(Key.RIGHT, modifiers=Modifier.CTRL | Modifier.SHIFT): EditorAction.SELECT_WORD_RIGHT,
        KeyEvent(Key.LEFT, modifiers=Modifier.CTRL): EditorAction.MOVE_CURSOR_WORD_LEFT,
        KeyEvent(Key.RIGHT, modifiers=Modifier.CTRL): EditorAction.MOVE_CURSOR_WORD_RIGHT,
        KeyEvent(Key.CTRL_A): EditorAction.SELECT_ALL,
        KeyEvent(Key.DELETE): EditorAction.DELETE_RIGHT,
        KeyEvent(Key.RUNE, "c", Modifier.ALT): EditorAction.COPY_SELECTION,
        KeyEvent(Key.CTRL_V): EditorAction.PASTE_AT_SELECTION,
        KeyEvent(Key.ENTER, modifiers=Modifier.ALT): EditorAction.INPUT_NEW_LINE,
        KeyEvent(Key.ENTER): EditorAction.SEND_MESSAGE,
    }
)


class Editor:
    """Text input with a cursor, selection, clipboard and mention detection.

    ``input_capture`` sees events the editor does not handle itself; returning
    None from it marks the event as consumed. ``on_mention_show`` receives the
    partial name typed after an ``@``; ``on_height_request`` receives the number
    of rows (including borders) the editor would like to have.
    """

    def __init__(
        self,
        *,
        bindings: Mapping[KeyEvent, EditorAction] = DEFAULT_BINDINGS,
        input_capture: Optional[KeyHandler] = None,
        read_clipboard: Optional[Callable[[], Optional[str]]] = None,
        write_clipboard: Optional[Callable[[str], object]] = None,
        width: Optional[int] = None,
    ) -> None:
        self.buffer = TextBuffer()
        self.bindings = bindings
        self.input_capture = input_capture
        self.read_clipboard = read_clipboard
        self.write_clipboard = write_clipboard
        self.on_mention_show: Optional[Callable[[str], object]] = None
        self.on_mention_hide: Optional[Callable[[], object]] = None
        self.on_height_request: Optional[Callable[[int], object]] = None
        self.requested_height = _INITIAL_HEIGHT
        self._width: Optional[int] = None
        self._mention_begin = 0
        self._mention_end = 0
        if width is not None:
            self.set_width(width)

    @property
    def width(self) -> Optional[int]:
        return self._width

    def set_width(self, width: int) -> None:
        """Set the inner width used to work out the requested height."""
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self._width = width

    def handle_key(self, event: KeyEvent) -> Optional[KeyEvent]:
        """Apply a key press; return the event if it was not consumed."""
        action = self.bindings.get(event)

        if action in _BUFFER_ACTIONS:
            getattr(self.buffer, action.value)()
        elif event.key in _BACKSPACE_KEYS:
            self.buffer.backspace()
        elif action is EditorAction.COPY_SELECTION:
            if self.write_clipboard is not None:
                self.write_clipboard(self.buffer.selection.replace(SELECTION_CHAR, ""))
            return None
        elif action is EditorAction.PASTE_AT_SELECTION:
            self._paste(event)
            return None
        elif action is EditorAction.INPUT_NEW_LINE:
            self.buffer.insert_character("\n")
        elif action is EditorAction.SEND_MESSAGE:
            if self.input_capture is None:
                return event
            return self.input_capture(event)
        elif (self.input_capture is None or self.input_capture(event) is not None) and event.rune:
            self.buffer.insert_character(event.rune)
        else:
            return event

        self.update_mention_handler()
        self._request_height_if_necessary()
        return None

    def _paste(self, event: KeyEvent) -> None:
        if self.input_capture is not None and self.input_capture(event) is None:
            return
        if self.read_clipboard is None:
            return
        content = self.read_clipboard()
        if content is None:
            return
        self.buffer.paste(content)
        self._request_height_if_necessary()

    def set_text(self, text: str) -> None:
        """Replace the text and put the cursor at its end."""
        self.buffer.set_text(text)
        self._request_height_if_necessary()

    def get_text(self) -> str:
        """The text without the cursor placeholder."""
        return self.buffer.text()

    def find_at_symbol_index(self) -> int:
        """Index of the ``@`` starting the word left of the cursor, or -1."""
        starts = [match.start() for match in _MENTION_START.finditer(self.buffer.left)]
        return starts[-1] if starts else -1

    def update_mention_handler(self) -> None:
        """Show or hide the mention handler depending on the current word."""
        at_index = self.find_at_symbol_index()
        if at_index == -1:
            self._hide_and_reset_mention()
        else:
            self._show_mention(at_index)

    def _show_mention(self, at_index: int) -> None:
        keyword = self.get_text()[at_index + 1:]
        self._mention_begin = at_index + 1
        self._mention_end = len(keyword) + at_index
        if self.on_mention_show is not None:
            self.on_mention_show(keyword)

    def _hide_and_reset_mention(self) -> None:
        self._mention_begin = 0
        self._mention_end = 0
        if self.on_mention_hide is not None:
            self.on_mention_hide()

    def mention_indices(self) -> Tuple[int, int]:
        """Start and end index of the text that a chosen mention replaces."""
        return self._mention_begin, self._mention_end

    def _request_height_if_necessary(self) -> None:
        if self.on_height_request is None or self._width is None:
            return
        height = calculate_necessary_height(self._width, self.get_text()) + _BORDER_ROWS
        if height != self.requested_height:
            self.requested_height = height
            self.on_height_request(height)