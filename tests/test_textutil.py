import pytest

from chatterm.textutil import calculate_necessary_height


def test_wrapping_line_with_trailing_newline():
    assert calculate_necessary_height(20, "abcdeabcdeabcde abcd \n") == 3


def test_single_short_line():
    assert calculate_necessary_height(20, "short") == 1


def test_height_never_below_line_count():
    text = "a\nbb\nccc\n"
    assert calculate_necessary_height(2, text) >= len(text.split("\n"))


def test_wider_component_needs_no_more_rows():
    text = "x" * 50 + "\n" + "y" * 7
    assert calculate_necessary_height(40, text) <= calculate_necessary_height(10, text)


@pytest.mark.parametrize("width", [0, -3])
def test_invalid_width(width):
    with pytest.raises(ValueError):
        calculate_necessary_height(width, "text")