"""Inline message formatting: bold/underline markers and code indentation."""

from __future__ import annotations

from typing import List, Tuple

_BOLD = "*"
_UNDERLINE = "_"


def _closing_pair_follows(rest: List[str], marker: str) -> bool:
    return rest.count(marker) >= 2


def parse_bold_and_underline(text: str) -> str:
    """Turn ``**bold**`` and ``__underline__`` into attribute tags."""
    chars = list(text)
    last_index = len(chars) - 1
    out: List[str] = []

    first_bold_found = False
    bold_open = False
    first_underline_found = False
    underline_open = False

    for index, char in enumerate(chars):
        out.append(char)
        if char == "\n":
            if bold_open and not underline_open:
                out.extend("[::b]")
            elif underline_open and not bold_open:
                out.extend("[::u]")
            elif bold_open and underline_open:
                out.extend("[::ub]")
        elif char == _BOLD:
            if not first_bold_found:
                first_bold_found = True
                continue
            first_bold_found = False
            if bold_open:
                bold_open = False
                del out[-2:]
                out.extend("[::u]" if underline_open else "[::-]")
            elif index != last_index and _closing_pair_follows(chars[index + 1:], _BOLD):
                if chars[index + 1] == _BOLD:
                    first_bold_found = True
                    continue
                bold_open = True
                del out[-2:]
                out.extend("[::ub]" if underline_open else "[::b]")
        elif char == _UNDERLINE:
            if not first_underline_found:
                first_underline_found = True
                continue
            first_underline_found = False
            if underline_open:
                underline_open = False
                del out[-2:]
                out.extend("[::b]" if bold_open else "[::-]")
            elif index != last_index and _closing_pair_follows(chars[index + 1:], _UNDERLINE):
                if chars[index + 1] == _UNDERLINE:
                    first_underline_found = True
                    continue
                underline_open = True
                del out[-2:]
                out.extend("[::bu]" if bold_open else "[::u]")
        else:
            first_bold_found = False
            first_underline_found = False

    return "".join(out)


def trim_min_prefix(char: str, text: str) -> Tuple[str, int]:
    """Strip the shortest common run of ``char`` from the start of each line.

    Empty lines are ignored when finding the run. Returns the new text and the
    number of characters removed per line.
    """
    lines = text.split("\n")
    counts = []
    for line in lines:
        if not line:
            continue
        amount = len(line) - len(line.lstrip(char))
        counts.append(amount)
        if amount == 0:
            break

    minimum = min(counts, default=0)
    if minimum == 0:
        return text, 0

    prefix = char * minimum
    return "\n".join(line.removeprefix(prefix) for line in lines), minimum


def remove_leading_whitespace_in_code(code: str) -> str:
    """Remove common leading spaces, or common leading tabs if there are none."""
    spaces_trimmed, amount = trim_min_prefix(" ", code)
    if amount > 0:
        return spaces_trimmed
    tabs_trimmed, _ = trim_min_prefix("\t", code)
    return tabs_trimmed