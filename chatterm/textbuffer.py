"""Editable text split into the part left of the cursor, the selection and the rest."""

from __future__ import annotations

SELECTION_CHAR = "\u205f"
_WORD_SEPARATORS = (" ", "\n")


class TextBuffer:
    """Text with a cursor, modelled as three parts: left, selection and right.

    The selection is never empty. A cursor at the very end of the text is a
    selection holding only ``SELECTION_CHAR``, which is not part of the text.
    """

    __slots__ = ("_left", "_selection", "_right")

    def __init__(self, text: str = "") -> None:
        self._left = ""
        self._selection = SELECTION_CHAR
        self._right = ""
        self.set_text(text)

    def __repr__(self) -> str:
        return (
            f"TextBuffer(left={self._left!r}, selection={self._selection!r}, "
            f"right={self._right!r})"
        )

    @property
    def left(self) -> str:
        return self._left

    @property
    def selection(self) -> str:
        return self._selection

    @property
    def right(self) -> str:
        return self._right

    @property
    def cursor_at_end(self) -> bool:
        """True if the cursor sits behind the last character."""
        return self._right == "" and self._selection == SELECTION_CHAR

    def _set(self, left: str, selection: str, right: str, *, fix: bool = True) -> None:
        if fix and right == "" and selection.strip(SELECTION_CHAR) == "":
            # A selection of placeholders only collapses into a single cursor.
            left = left.rstrip(SELECTION_CHAR)
            selection = SELECTION_CHAR
        self._left = left
        self._selection = selection
        self._right = right

    def set_text(self, text: str) -> None:
        """Replace the whole text and put the cursor at its end."""
        self._set(text, SELECTION_CHAR, "", fix=False)

    def text(self) -> str:
        """The text without the cursor placeholder."""
        if self.cursor_at_end:
            return self._left
        return self._left + self._selection + self._right

    def move_cursor_left(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if left:
            current = "" if selection == SELECTION_CHAR else selection
            self._set(left[:-1], left[-1], current + right, fix=False)
        elif selection:
            self._set("", selection[0], selection[1:] + right)

    def move_cursor_right(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if right:
            self._set(left + selection, right[0], right[1:])
        elif selection.endswith(SELECTION_CHAR):
            self._set(left + selection[:-1], SELECTION_CHAR, "")
        else:
            self._set(left + selection, SELECTION_CHAR, "")

    def expand_selection_to_left(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if left:
            current = "" if selection == SELECTION_CHAR else selection
            self._set(left[:-1], left[-1] + current, right, fix=False)

    def expand_selection_to_right(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if right:
            self._set(left, selection + right[0], right[1:])
        elif selection.endswith(SELECTION_CHAR):
            self._set(left, selection, "")
        else:
            self._set(left, selection + SELECTION_CHAR, "")

    @staticmethod
    def _word_start(left: str) -> int:
        # The character directly left of the selection is skipped.
        for index in range(len(left) - 2, -1, -1):
            if left[index] in _WORD_SEPARATORS:
                return index
        return 0

    @staticmethod
    def _word_end(right: str) -> int:
        # The character directly right of the selection is skipped.
        for index in range(1, len(right) - 1):
            if right[index] in _WORD_SEPARATORS:
                return index
        return len(right) - 1

    def select_word_left(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if not left:
            return
        start = self._word_start(left)
        if start != 0:
            self._set(left[: start + 1], left[start + 1:] + selection, right)
        else:
            self._set("", left + selection, right)

    def select_word_right(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if not right:
            return
        end = self._word_end(right)
        if end != len(right) - 1:
            self._set(left, selection + right[:end], right[end:])
        else:
            self._set(left, selection + right, "")

    def move_cursor_word_left(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if not left:
            return
        position = self._word_start(left)
        if position != 0:
            self._set(left[:position], left[position], left[position + 1:] + selection + right)
        else:
            self._set("", left[0], left[1:] + selection + right)

    def move_cursor_word_right(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if not right:
            return
        position = self._word_end(right)
        if position != len(right) - 1:
            self._set(left + selection + right[:position], right[position], right[position + 1:])
        else:
            self._set(left + selection + right, SELECTION_CHAR, "")

    def select_all(self) -> None:
        left, selection, right = self._left, self._selection, self._right
        if left or right:
            self._set("", left + selection + right, "")

    def delete_right(self) -> None:
        """Delete the selection, or the character under the cursor."""
        left, selection, right = self._left, self._selection, self._right
        if selection.endswith(SELECTION_CHAR):
            self._set(left, SELECTION_CHAR, "")
        elif right:
            self._set(left, right[0], right[1:])
        else:
            self._set(left, SELECTION_CHAR, "")

    def backspace(self) -> None:
        """Delete the character left of the cursor, or a multi-character selection."""
        left, selection, right = self._left, self._selection, self._right
        if len(selection) == 1 and left:
            self._set(left[:-1], selection, right, fix=False)
        elif len(selection) > 1:
            if right:
                self._set(left, right[0], right[1:])
            else:
                self._set(left, SELECTION_CHAR, "")

    def paste(self, content: str) -> None:
        """Insert ``content`` at the cursor, replacing a multi-character selection."""
        left, selection, right = self._left, self._selection, self._right
        if selection == SELECTION_CHAR:
            self._set(left + content, selection, "")
        elif len(selection) == 1:
            self._set(left + content, selection, right)
        elif right:
            self._set(left + content, right[0], right[1:])
        else:
            self._set(left + content, SELECTION_CHAR, "")

    def insert_character(self, character: str) -> None:
        """Insert a single character left of the cursor."""
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        left, selection, right = self._left, self._selection, self._right
        if not right:
            kept = selection if len(selection) == 1 else SELECTION_CHAR
            self._set(left + character, kept, "")
        elif len(selection) == 1:
            self._set(left + character, selection, right)
        else:
            self._set(left + character, right[0], right[1:])