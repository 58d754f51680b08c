import pytest

from chatterm.markdown import (
    parse_bold_and_underline,
    remove_leading_whitespace_in_code,
    trim_min_prefix,
)


@pytest.mark.parametrize(
    "text, want",
    [
        ("**Hallo Welt**", "[::b]Hallo Welt[::-]"),
        ("****Hallo Welt", "****Hallo Welt"),
        ("**Hallo Welt", "**Hallo Welt"),
        ("**Hallo\nWelt**", "[::b]Hallo\n[::b]Welt[::-]"),
        ("Hallo**\nWelt**", "Hallo[::b]\n[::b]Welt[::-]"),
        ("Hal**lo\nWelt**", "Hal[::b]lo\n[::b]Welt[::-]"),
        ("__Hallo Welt__", "[::u]Hallo Welt[::-]"),
        ("____Hallo Welt", "____Hallo Welt"),
        ("__Hallo Welt", "__Hallo Welt"),
        ("__Hallo\nWelt__", "[::u]Hallo\n[::u]Welt[::-]"),
        ("Hallo__\nWelt__", "Hallo[::u]\n[::u]Welt[::-]"),
        ("Hal__lo\nWelt__", "Hal[::u]lo\n[::u]Welt[::-]"),
        ("**__Hallo Welt__**", "[::b][::bu]Hallo Welt[::b][::-]"),
        ("** OwO__Hallo Welt__**", "[::b] OwO[::bu]Hallo Welt[::b][::-]"),
        ("** OwO__Hallo Welt__** What", "[::b] OwO[::bu]Hallo Welt[::b][::-] What"),
        ("", ""),
        ("simple\nsimple", "simple\nsimple"),
        ("a **simple** b", "a [::b]simple[::-] b"),
        ("a __simple__ b", "a [::u]simple[::-] b"),
        ("a **__simple__** b", "a [::b][::bu]simple[::b][::-] b"),
        ("a **fat__simple__fat** b", "a [::b]fat[::bu]simple[::b]fat[::-] b"),
        ("a __underline**fat**underline__ b", "a [::u]underline[::ub]fat[::u]underline[::-] b"),
        ("a __underline**fatunderline__ b", "a [::u]underline**fatunderline[::-] b"),
    ],
)
def test_parse_bold_and_underline(text, want):
    assert parse_bold_and_underline(text) == want


@pytest.mark.parametrize(
    "code, want",
    [
        ("1", "1"),
        ("1\n2", "1\n2"),
        (" 1", "1"),
        ("  1", "1"),
        ("    1", "1"),
        ("    1\n  2\n 3", "   1\n 2\n3"),
        ("\t1", "1"),
        ("\t1\n\t2", "1\n2"),
        ("\t\t1\n\t\t2", "1\n2"),
        ("\t\t\t\t1\n\t\t2", "\t\t1\n2"),
        ("\t1\n2", "\t1\n2"),
        ("\t\t\t1", "1"),
        (" \t1\n  \t2\n \t3", "\t1\n \t2\n\t3"),
        ("\t1\n\n\t2\n\t3", "1\n\n2\n3"),
    ],
)
def test_remove_leading_whitespace_in_code(code, want):
    assert remove_leading_whitespace_in_code(code) == want


def test_trim_min_prefix_reports_amount():
    assert trim_min_prefix(" ", "    1\n  2\n 3") == ("   1\n 2\n3", 1)


def test_trim_min_prefix_without_common_prefix():
    assert trim_min_prefix("\t", "\t1\n2") == ("\t1\n2", 0)


def test_trim_min_prefix_only_empty_lines():
    assert trim_min_prefix(" ", "\n\n") == ("\n\n", 0)