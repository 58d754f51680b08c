# chatterm

Building blocks for a terminal chat client, in plain Python with no
third-party dependencies. It turns inline markdown into attribute tags, edits
input text with a cursor and a selection, keeps a command history, and
maintains the guild and user lists as trees of nodes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `chatterm.markdown`
  - `parse_bold_and_underline(text)` turns `**bold**` and `__underline__` into
    `[::b]`, `[::u]`, `[::bu]`/`[::ub]` and `[::-]` tags, reopening the active
    attributes after each newline. Unclosed markers are left as they are.
  - `trim_min_prefix(char, text)` strips the shortest common run of `char` from
    the start of every line, ignoring empty lines, and returns the new text and
    the amount removed.
  - `remove_leading_whitespace_in_code(code)` removes the common leading spaces,
    or the common leading tabs if no spaces are shared.
- `chatterm.textutil`: `calculate_necessary_height(width, text)` counts the rows
  that text needs when wrapped at `width`; a width below 1 raises `ValueError`.
- `chatterm.keys`: `Key`, `Modifier` and the frozen `KeyEvent` describe key
  presses. `focus_on_type_handler(focus, forward)` builds a handler that, for a
  typed character without modifiers, calls `focus`, passes the event to
  `forward` and consumes it.
- `chatterm.models`: the data classes `User`, `Member`, `Role`, `Channel`,
  `Guild`, `Attachment`, `Message` and `Relationship`, the enums `ChannelType`,
  `MessageType` and `RelationType`, and the in-memory `State` cache with
  `channel()`, `private_channel()`, `guild()`, `members()`, `member()` and
  `role()`. A failed lookup raises `StateError` (a `LookupError`).
- `chatterm.tree`: `TreeNode` with text, a reference, a parent, and
  `add_child()`, `remove_child()`, `clear_children()`, `walk()` and `find()`.
- `chatterm.textbuffer`: `TextBuffer` holds text as the part left of the
  cursor, the selection and the rest, with cursor and word movement, selection,
  `select_all()`, `delete_right()`, `backspace()`, `paste()`,
  `insert_character()`, `set_text()` and `text()`.
- `chatterm.editor`: `Editor` maps `KeyEvent`s to `EditorAction`s through a
  bindings table (`DEFAULT_BINDINGS` by default) and applies them to its
  `TextBuffer`. Clipboard access goes through the `read_clipboard` and
  `write_clipboard` callables you pass in. It reports a partial name typed after
  `@` through `on_mention_show`, hides it through `on_mention_hide`, and asks for
  a new height through `on_height_request` once `set_width()` has been called.
- `chatterm.commandview`: `CommandView` runs entered commands through
  `on_execute_command`, keeps them in `history`, cycles through them with the
  up and down keys, and collects output text with `write()`.
- `chatterm.guildlist`: `GuildList` keeps one node per named guild, escapes
  names, and offers `add_guild()`, `remove_guild()`, `update_name()` and a
  selection handler.
- `chatterm.usertree`: `UserTree` loads the recipients of a group channel or the
  members of a guild, grouping members under their highest hoisted role.

## Example

```python
from chatterm.markdown import parse_bold_and_underline
from chatterm.textbuffer import TextBuffer

parse_bold_and_underline("**Hallo Welt**")
# '[::b]Hallo Welt[::-]'

buffer = TextBuffer("hello")
buffer.move_cursor_left()
buffer.insert_character("!")
buffer.text()
# 'hell!o'
```

## What this package does not do

It draws nothing on a terminal and opens no network connection: the widgets
here hold state and react to `KeyEvent`s, and the data in `State` must be
filled in by the caller. It does not render whole chat messages with
timestamps, author names, mentions, spoilers or syntax-highlighted code
blocks, it has no colour theme, and it has no list of private chats and
friends. There is no command to start.