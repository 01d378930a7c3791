import logging

import pytest

from runetrie import InvalidInputError, Lexicon
from runetrie import lexicon as lexicon_module


@pytest.fixture(autouse=True)
def no_default_word_files(monkeypatch):
    monkeypatch.setattr(lexicon_module, "DEFAULT_WORD_FILES", [])


def write_words(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_words_given_directly():
    lex = Lexicon(words=["car", "cards", "care", "car"])
    assert len(lex) == 3
    assert "cards" in lex
    assert "ca" not in lex
    assert lex.source is None


def test_load_from_file(tmp_path, caplog):
    path = write_words(tmp_path / "words.txt", ["# header", "apple", "", "  app  ", "ape", "apple"])
    with caplog.at_level(logging.INFO, logger="runetrie"):
        lex = Lexicon(path)
    assert len(lex) == 3
    assert "app" in lex
    assert lex.source == path
    assert "Loaded 3 words from" in caplog.text


def test_missing_path_falls_back_to_defaults(tmp_path, monkeypatch, caplog):
    fallback = write_words(tmp_path / "fallback.txt", ["zebra"])
    monkeypatch.setattr(lexicon_module, "DEFAULT_WORD_FILES", [str(tmp_path / "nope.txt"), fallback])
    with caplog.at_level(logging.INFO, logger="runetrie"):
        lex = Lexicon(str(tmp_path / "missing.txt"))
    assert lex.source == fallback
    assert "zebra" in lex
    assert "not found" in caplog.text


def test_empty_file_is_skipped(tmp_path, monkeypatch):
    empty = write_words(tmp_path / "empty.txt", ["# nothing here"])
    full = write_words(tmp_path / "full.txt", ["one"])
    monkeypatch.setattr(lexicon_module, "DEFAULT_WORD_FILES", [full])
    lex = Lexicon(empty)
    assert lex.source == full
    assert len(lex) == 1


def test_nothing_found_gives_empty_lexicon(caplog):
    with caplog.at_level(logging.WARNING, logger="runetrie"):
        lex = Lexicon()
    assert len(lex) == 0
    assert lex.complete("") == []
    assert "No word file found" in caplog.text


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(InvalidInputError) as excinfo:
        Lexicon(str(path))
    assert str(path) in str(excinfo.value)


def test_add():
    lex = Lexicon(words=[])
    assert lex.add("word") is True
    assert lex.add("word") is False
    assert len(lex) == 1


def test_complete_is_sorted_and_limited():
    lex = Lexicon(words=["cart", "cat", "car", "Car", "dog"])
    assert lex.complete("ca") == ["car", "cart", "cat"]
    assert lex.complete("ca", limit=2) == ["car", "cart"]
    assert lex.complete("") == ["Car", "car", "cart", "cat", "dog"]
    assert lex.complete("x") == []


def test_unique_suffix():
    lex = Lexicon(words=["car", "cards", "care"])
    assert lex.unique_suffix("cards") == "ds"
    assert lex.unique_suffix("car") == ""
    assert lex.unique_suffix("dog") is None


def test_abbreviations():
    lex = Lexicon(words=["a", "ab", "apple", "apricot"])
    assert lex.abbreviations() == {
        "a": "",
        "ab": "b",
        "apple": "ple",
        "apricot": "ricot",
    }


def test_directory_path_raises(tmp_path):
    words_dir = tmp_path / "words_dir"
    words_dir.mkdir()
    with pytest.raises(InvalidInputError) as excinfo:
        Lexicon(str(words_dir))
    assert str(words_dir) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_negative_limit_rejected():
    lex = Lexicon(words=["car", "cart", "cat"])
    with pytest.raises(InvalidInputError):
        lex.complete("ca", limit=-1)
    assert lex.complete("ca", limit=0) == []
