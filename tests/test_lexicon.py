import tomllib
from importlib.resources import files
from pathlib import Path

import pytest

from lexicon import DEFAULT_WORDS, load_lexicon

ROOT = Path(__file__).resolve().parent.parent


def _write(tmp_path, text):
    p = tmp_path / "words.txt"
    p.write_text(text, encoding="utf-8")
    return p


def test_normalises_and_deduplicates(tmp_path):
    path = _write(tmp_path, "Apple\n  apple \nbanana\ncafé\nx-ray\n\nit's\n")
    lex = load_lexicon(path)
    assert lex.words == ["apple", "banana", "cafe"]
    assert lex.source == path


def test_word_length_filter(tmp_path):
    path = _write(tmp_path, "apple\nbanana\ngrape\n")
    lex = load_lexicon(path, word_length=5)
    assert lex.words == ["apple", "grape"]


def test_lengths_and_of_length(tmp_path):
    path = _write(tmp_path, "apple\nbanana\ngrape\nfig\n")
    lex = load_lexicon(path)
    assert lex.lengths() == {3: 1, 5: 2, 6: 1}
    assert lex.of_length(5) == ["apple", "grape"]
    assert lex.of_length(9) == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "nope.txt")


def test_no_usable_words(tmp_path):
    path = _write(tmp_path, "123\n---\n")
    with pytest.raises(ValueError):
        load_lexicon(path)
    with pytest.raises(ValueError, match="7-letter"):
        load_lexicon(_write(tmp_path, "apple\n"), word_length=7)


def test_bundled_list():
    lex = load_lexicon()
    assert lex.source == DEFAULT_WORDS
    assert set(lex.lengths()) == {4, 5}
    assert lex.words == sorted(set(lex.words))


def test_default_list_is_read_from_package_resource():
    resource = files("wordlists").joinpath("mini_english.txt")
    assert resource.is_file()
    expected = sorted(set(resource.read_text(encoding="utf-8").split()))
    assert load_lexicon().words == expected


def test_bundled_list_is_declared_as_package_data():
    config = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    setuptools_cfg = config["tool"]["setuptools"]
    assert "wordlists" in setuptools_cfg["packages"]
    assert "*.txt" in setuptools_cfg["package-data"]["wordlists"]
