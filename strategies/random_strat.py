"""Random strategy: pick uniformly at random among unguessed letters."""

from __future__ import annotations

import random

from strategy import Strategy, GameConfig


class RandomStrategy(Strategy):
    """Guess a random letter of the alphabet that has not been tried yet."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "Random"

    def begin_game(self, config: GameConfig) -> None:
        self._alphabet = config.alphabet

    def guess(self, pattern: str, guessed: frozenset[str]) -> str:
        choices = [c for c in self._alphabet if c not in guessed]
        return self._rng.choice(choices)
