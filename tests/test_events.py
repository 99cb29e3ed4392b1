from wordletui.datasets import WordSource
from wordletui.game import Event, GameEngine, Outcome, dispatch


def make_engine():
    return GameEngine(WordSource(["crane"], allowed=["slate"]))


def test_events_map_to_engine_operations():
    e = make_engine()
    for c in "slatx":
        assert dispatch(e, Event.LETTER, c) is True
    assert e.state.current_input == "slatx"

    dispatch(e, Event.BACKSPACE)
    dispatch(e, Event.LETTER, "e")
    dispatch(e, Event.SUBMIT)
    assert e.state.guess_history == {0: "slate"}

    dispatch(e, Event.REVEAL)
    assert e.state.reveal_answer is True

    dispatch(e, Event.RESET)
    assert e.state.round == 0 and e.state.reveal_answer is False


def test_letter_event_without_char_is_ignored():
    e = make_engine()
    dispatch(e, Event.LETTER)
    assert e.state.current_input == ""


def test_quit_stops_the_loop_without_touching_state():
    e = make_engine()
    dispatch(e, Event.LETTER, "c")
    assert dispatch(e, Event.QUIT) is False
    assert e.state.current_input == "c"
    assert e.state.outcome is Outcome.IN_PROGRESS
