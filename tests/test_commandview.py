from chatterm.commandview import NO_HISTORY_INDEX, WELCOME_TEXT, CommandView
from chatterm.keys import Key, KeyEvent, Modifier


def make_view():
    executed = []
    view = CommandView(executed.append)
    return view, executed


def enter_command(view, text):
    for char in text:
        view.input.handle_key(KeyEvent(Key.RUNE, char))
    view.input.handle_key(KeyEvent(Key.ENTER))


def test_enter_executes_stripped_command_and_records_history():
    view, executed = make_view()
    enter_command(view, " ls ")
    assert executed == ["ls"]
    assert view.history == [" ls "]
    assert view.input.get_text() == ""
    assert view.history_index == NO_HISTORY_INDEX


def test_empty_enter_does_nothing():
    view, executed = make_view()
    assert view.handle_input(KeyEvent(Key.ENTER)) is None
    assert executed == []
    assert view.history == []


def test_up_cycles_back_through_history():
    view, _ = make_view()
    enter_command(view, "one")
    enter_command(view, "two")
    view.handle_input(KeyEvent(Key.UP))
    assert view.input.get_text() == "two"
    view.handle_input(KeyEvent(Key.UP))
    assert view.input.get_text() == "one"
    assert view.handle_input(KeyEvent(Key.UP)) is None
    assert view.input.get_text() == "one"


def test_down_from_no_selection_starts_at_oldest():
    view, _ = make_view()
    enter_command(view, "first")
    enter_command(view, "second")
    view.handle_input(KeyEvent(Key.DOWN))
    assert view.input.get_text() == "first"
    view.handle_input(KeyEvent(Key.DOWN))
    assert view.input.get_text() == "second"
    assert view.handle_input(KeyEvent(Key.DOWN)) is None


def test_scroll_keys_are_forwarded_to_output():
    forwarded = []
    view = CommandView(lambda command: None, output_handler=forwarded.append)
    assert view.handle_input(KeyEvent(Key.PG_UP)) is None
    assert view.handle_input(KeyEvent(Key.DOWN, modifiers=Modifier.CTRL)) is None
    assert forwarded == [KeyEvent(Key.PG_UP), KeyEvent(Key.DOWN)]


def test_unhandled_event_is_returned():
    view, _ = make_view()
    event = KeyEvent(Key.ESC)
    assert view.handle_input(event) is event


def test_input_handler_can_consume_events():
    view, _ = make_view()
    view.input_handler = lambda event: None
    view.input.handle_key(KeyEvent(Key.RUNE, "z"))
    assert view.input.get_text() == ""


def test_write_appends_to_output():
    view, _ = make_view()
    assert view.output == WELCOME_TEXT
    assert view.write("result\n") == len("result\n")
    assert view.output == WELCOME_TEXT + "result\n"


def test_set_visible():
    view, _ = make_view()
    view.set_visible(False)
    assert view.visible is False
    view.set_visible(True)
    assert view.visible is True