"""Entropy strategy: maximise information about which words survive.

Against an adversary the answer to a guess is the largest group, not a
random one, but spreading the possible words over many small groups
still shrinks whatever group the engine keeps.
"""

from __future__ import annotations

import numpy as np

from hangman_env import filter_candidates, partition
from strategy import Strategy, GameConfig


class EntropyStrategy(Strategy):
    """Select the letter that maximises Shannon entropy of the pattern partition.

    Ties are broken by the size of the largest group (smaller is better),
    then alphabetically.
    """

    @property
    def name(self) -> str:
        return "Entropy"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)
        self._alphabet = config.alphabet

    def guess(self, pattern: str, guessed: frozenset[str]) -> str:
        candidates = filter_candidates(self._vocab, pattern, guessed)
        unguessed = [c for c in self._alphabet if c not in guessed]
        if len(candidates) <= 1:
            # Nothing to split: fill in the remaining letters of the last word.
            missing = [c for c in (candidates[0] if candidates else "") if c in unguessed]
            return missing[0] if missing else unguessed[0]

        best_letter = unguessed[0]
        best_key = (-1.0, 0)
        n = len(candidates)
        for letter in unguessed:
            sizes = np.array(
                [len(g) for g in partition(candidates, pattern, letter).values()],
                dtype=float,
            )
            probs = sizes / n
            ent = float(-np.sum(probs * np.log2(probs)))
            key = (ent, -int(sizes.max()))
            if key > best_key:
                best_key = key
                best_letter = letter
        return best_letter
