import pytest
from wordletui.engine import score, is_win, merge_letter_states, check_guess, UNKNOWN_WORD


# --- single-pass scheme (default) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("music", "mulch", "GGXXY"),
    ("slate", "crane", "XXGXG"),
    ("crane", "crane", "GGGGG"),
    ("eerie", "crane", "YYYXG"),
    ("sassy", "swiss", "GXYGX"),
    ("belle", "level", "XGYYY"),
    ("lemon", "level", "GGXXX"),
])
def test_score_single_pass_golden(guess, target, expected):
    assert score(guess, target) == expected


# --- duplicate-aware (classic) scheme ---
@pytest.mark.parametrize("guess,target,expected", [
    ("eerie", "crane", "XXYXG"),
    ("belle", "level", "XGYYY"),
    ("cools", "scoop", "YYGXY"),
    ("music", "mulch", "GGXXY"),
    ("crane", "crane", "GGGGG"),
])
def test_score_duplicate_aware_golden(guess, target, expected):
    assert score(guess, target, duplicate_aware=True) == expected


def test_score_length_mismatch_is_an_assertion():
    with pytest.raises(AssertionError):
        score("cran", "crane")


@pytest.mark.parametrize("pattern,expected", [
    ("GGGGG", True),
    ("GGGGY", False),
    ("XXXXX", False),
    ("YYYYY", False),
    ("", False),
])
def test_is_win_requires_every_position_correct(pattern, expected):
    assert is_win(pattern) is expected


def test_merge_letter_states_never_downgrades():
    letters = {}
    merge_letter_states(letters, "slate", "XXGXG")
    merge_letter_states(letters, "trace", "XYYYG")
    assert letters["a"] == "G"       # stays green after a later yellow
    assert letters["r"] == "Y"
    assert letters["s"] == "X"
    assert letters["e"] == "G"


def test_check_guess_messages():
    known = {"crane", "slate"}.__contains__
    assert check_guess("crane", known, N=5) is None
    assert check_guess("cra", known, N=5) == "Word must be 5 letters long!"
    assert check_guess("cranes", known, N=5) == "Word must be 5 letters long!"
    assert check_guess("zzzzz", known, N=5) == UNKNOWN_WORD


def test_check_guess_skips_lookup_on_bad_length():
    calls = []

    def contains(w):
        calls.append(w)
        return True

    assert check_guess("ab", contains, N=5) is not None
    assert calls == []
