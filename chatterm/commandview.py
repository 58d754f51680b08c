"""Command output and input with a history of entered commands."""

from __future__ import annotations

from typing import Callable, List, Optional

from chatterm.editor import Editor
from chatterm.keys import Key, KeyEvent, KeyHandler, Modifier

NO_HISTORY_INDEX = -1
WELCOME_TEXT = (
    "[::b]### Welcome back. ###\n"
    "\tIf you need to know more, run the [::b]man[::-] command.\n"
)


class CommandView:
    """An output area and an input editor; confirmed commands go to the history.

    ``output_handler`` receives scrolling keys meant for the output area.
    ``input_handler`` sees input events the command view passes on.
    """

    def __init__(
        self,
        on_execute_command: Callable[[str], object],
        *,
        output_handler: Optional[KeyHandler] = None,
    ) -> None:
        self.on_execute_command = on_execute_command
        self.output_handler = output_handler
        self.input_handler: Optional[KeyHandler] = None
        self.output = WELCOME_TEXT
        self.visible = True
        self.history: List[str] = []
        self.history_index = NO_HISTORY_INDEX
        self.input = Editor(input_capture=self._capture_input)

    def _capture_input(self, event: KeyEvent) -> Optional[KeyEvent]:
        passed = self.handle_input(event)
        if passed is None or self.input_handler is None:
            return passed
        return self.input_handler(passed)

    def _forward_to_output(self, key: Key) -> None:
        if self.output_handler is not None:
            self.output_handler(KeyEvent(key))

    def _recall(self) -> None:
        self.input.set_text(self.history[self.history_index])

    def handle_input(self, event: KeyEvent) -> Optional[KeyEvent]:
        """Handle history, execution and scrolling keys of the input."""
        if event.modifiers == Modifier.NONE:
            if event.key in (Key.PG_UP, Key.PG_DN):
                self._forward_to_output(event.key)
                return None

            if event.key is Key.ENTER:
                # Entering anything resets history cycling to the newest entry.
                self.history_index = NO_HISTORY_INDEX
                command = self.input.get_text()
                if not command:
                    return None
                self.on_execute_command(command.strip())
                self.input.set_text("")
                self.history.append(command)
                return None

            if event.key is Key.DOWN:
                if self.history_index > len(self.history) - 1:
                    self.history_index = 0
                else:
                    self.history_index += 1
                if self.history_index > len(self.history) - 1:
                    return None
                self._recall()

            if event.key is Key.UP:
                if self.history_index < 0:
                    self.history_index = len(self.history) - 1
                else:
                    self.history_index -= 1
                if self.history_index < 0:
                    return None
                self._recall()

        if event.modifiers == Modifier.CTRL and event.key in (Key.UP, Key.DOWN):
            self._forward_to_output(event.key)
            return None

        return event

    def write(self, text: str) -> int:
        """Append text to the output and return the number of characters written."""
        self.output += text
        return len(text)

    def set_visible(self, visible: bool) -> None:
        self.visible = visible