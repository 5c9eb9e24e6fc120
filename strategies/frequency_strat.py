"""Frequency strategy: guess the letter found in the most possible words."""

from __future__ import annotations

from collections import Counter

from hangman_env import filter_candidates
from strategy import Strategy, GameConfig


class FrequencyStrategy(Strategy):
    """Guess the unguessed letter contained in the most consistent words.

    Each word counts a letter once, however often it occurs.  Ties go to
    the alphabetically first letter.
    """

    @property
    def name(self) -> str:
        return "Frequency"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)
        self._alphabet = config.alphabet

    def guess(self, pattern: str, guessed: frozenset[str]) -> str:
        candidates = filter_candidates(self._vocab, pattern, guessed)
        counts: Counter[str] = Counter()
        for w in candidates:
            counts.update(set(w) - guessed)
        unguessed = [c for c in self._alphabet if c not in guessed]
        return max(unguessed, key=lambda c: (counts[c], -ord(c)))
