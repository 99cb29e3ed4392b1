from pathlib import Path

import pytest

from wordletui.datasets import (
    EmptyVocabularyError, VocabularyError, WordSource, default_words_path,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_from_file_normalises_and_drops_bad_lines(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("  Crane \nSLATE\ncranes\nab1de\n\ncrane\n", encoding="utf-8")

    src = WordSource.from_file(p)
    assert len(src) == 2
    assert src.contains("crane") and src.contains("CRANE") and src.contains("slate")
    assert not src.contains("cranes")


def test_missing_file_is_a_vocabulary_error(tmp_path: Path):
    with pytest.raises(VocabularyError):
        WordSource.from_file(tmp_path / "missing.txt")


def test_empty_vocabulary_fails_on_pick(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n", encoding="utf-8")

    src = WordSource.from_file(p)
    assert len(src) == 0
    with pytest.raises(EmptyVocabularyError):
        src.pick_random_word()


def test_empty_vocabulary_error_is_a_vocabulary_error():
    assert issubclass(EmptyVocabularyError, VocabularyError)


def test_allowed_words_are_guessable_but_never_picked(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    _write(ans, ["crane"])
    _write(allw, ["slate", "trace"])

    src = WordSource.from_file(ans, allowed_path=allw, seed=1)
    assert src.known_count == 3
    assert src.contains("trace")
    assert {src.pick_random_word() for _ in range(20)} == {"crane"}


def test_pick_is_reproducible_with_seed():
    words = ["crane", "slate", "raise", "tears", "adieu", "mulch"]
    a = WordSource(words, seed=42)
    b = WordSource(words, seed=42)
    seq_a = [a.pick_random_word() for _ in range(10)]
    seq_b = [b.pick_random_word() for _ in range(10)]
    assert seq_a == seq_b
    assert set(seq_a) <= set(words)


def test_pick_covers_the_vocabulary():
    words = ["crane", "slate", "raise"]
    src = WordSource(words, seed=0)
    assert {src.pick_random_word() for _ in range(200)} == set(words)


def test_bundled_list_loads():
    src = WordSource.from_file(default_words_path(), seed=3)
    assert len(src) > 500
    assert len(src.pick_random_word()) == 5
