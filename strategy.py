"""Abstract base class for hangman guessing strategies."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """All information a strategy receives at the start of each game.

    Attributes
    ----------
    word_length : int
        Number of letters in the word being guessed.
    vocabulary : tuple[str, ...]
        Every dictionary word of ``word_length`` letters.  The engine's
        candidates are always a subset of these.
    max_guesses : int
        Misses allowed before the game is lost.
    alphabet : str
        Letters a strategy may guess.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    max_guesses: int
    alphabet: str = string.ascii_lowercase


class Strategy(ABC):
    """Interface that every hangman strategy must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called at the start of each game.

        The default implementation does nothing.
        """

    @abstractmethod
    def guess(self, pattern: str, guessed: frozenset[str]) -> str:
        """Return the next letter given the visible pattern and past guesses.

        Must not return a letter already in *guessed*.
        """
        ...

    def end_game(self, word: str, solved: bool, misses: int) -> None:
        """Called at the end of each game.

        *word* is the candidate the engine names once the game is over.
        The default implementation does nothing.
        """
