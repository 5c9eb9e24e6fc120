"""Word-list loading utilities (self-contained).

Reads plain text, one word per line.  Words are lowercased, stripped of
accents and deduplicated; anything that is not purely alphabetic is
dropped.  The engine itself takes any in-memory sequence of words, so
this module only exists for the command-line drivers.
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from dataclasses import dataclass
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path


# Bundled list, shipped as package data of ``wordlists``.
DEFAULT_WORDS = files("wordlists").joinpath("mini_english.txt")


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


# ------------------------------------------------------------------
# Lexicon dataclass
# ------------------------------------------------------------------

@dataclass
class Lexicon:
    """A sorted, deduplicated word list."""
    words: list[str]
    source: Path | Traversable

    def lengths(self) -> dict[int, int]:
        """Map word length -> number of words of that length."""
        return dict(sorted(Counter(len(w) for w in self.words).items()))

    def of_length(self, n: int) -> list[str]:
        return [w for w in self.words if len(w) == n]


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _load_txt(path: Path | Traversable, word_length: int | None) -> list[str]:
    seen: set[str] = set()
    words: list[str] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        w = _strip_accents(raw.strip().lower())
        if not w or w in seen or not w.isalpha():
            continue
        if word_length is not None and len(w) != word_length:
            continue
        seen.add(w)
        words.append(w)
    words.sort()
    return words


def load_lexicon(
    path: str | Path | None = None,
    word_length: int | None = None,
) -> Lexicon:
    """Load a word list.

    Parameters
    ----------
    path : str, Path or None
        Plain-text file, one word per line.  None uses the bundled
        ``mini_english.txt`` from the ``wordlists`` package.
    word_length : int or None
        Keep only words of this length.  None keeps every length.

    Returns
    -------
    Lexicon

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If no usable words are found.
    """
    src = Path(path) if path is not None else DEFAULT_WORDS
    if not src.is_file():
        raise FileNotFoundError(f"Word list not found: {src}")

    words = _load_txt(src, word_length)
    if not words:
        if word_length is None:
            raise ValueError(f"No words found in {src}")
        raise ValueError(f"No {word_length}-letter words found in {src}")

    return Lexicon(words=words, source=src)
