from pathlib import Path
from wordletui.datasets import validate_wordlist, pretty_summary, default_words_path


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    _write(ans, ["crane", "raise", "STARE"])   # case is normalised

    rep = validate_wordlist(5, str(ans))
    assert rep["passed"] is True
    assert rep["answers"]["count"] == 3
    assert rep["allowed"] is None
    s = pretty_summary(rep)
    assert s.startswith("N=5 | answers=3") and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'raiser' is fine
    ans = tmp_path / "answers_6.txt"
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")

    rep = validate_wordlist(6, str(ans))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_blank_lines_and_duplicates(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    ans.write_text("crane\n\n  \ncrane\nslate\n", encoding="utf-8")

    rep = validate_wordlist(5, str(ans))
    # duplicates are reported but the loader dedupes them, so still a pass
    assert rep["passed"] is True
    assert rep["answers"]["unique_count"] == 2
    assert "answers contains duplicate lines" in rep["issues"]


def test_validate_wordlist_missing_and_empty(tmp_path: Path):
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")

    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["answers"]["exists"] is False

    rep = validate_wordlist(5, str(empty))
    assert rep["passed"] is False
    assert "answers file contains 0 valid words" in rep["issues"]


def test_validate_wordlist_with_allowed(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    _write(ans, ["crane", "stare"])
    _write(allw, ["trace", "cared", "x"])

    rep = validate_wordlist(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["allowed"]["invalid_lines"] == 1
    assert "allowed=2" in pretty_summary(rep)


def test_bundled_word_list_is_clean():
    rep = validate_wordlist(5, str(default_words_path()))
    assert rep["passed"] is True
    assert rep["answers"]["count"] == rep["answers"]["unique_count"]
