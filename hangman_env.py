"""Evil hangman environment: an adversarial letter-guessing engine.

The engine never picks a secret word.  It keeps every dictionary word that
is still consistent with the answers given so far and, after each guess,
adopts whichever answer leaves the most words alive.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)

# Symbol for a position whose letter has not been revealed.
PLACEHOLDER = "-"


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------

class HangmanError(Exception):
    """Base class for engine errors."""


class InvalidArgument(HangmanError, ValueError):
    """A parameter violates a precondition (bad length, repeated letter...)."""


class InvalidState(HangmanError, RuntimeError):
    """The engine cannot perform the operation in its current state."""


# ------------------------------------------------------------------
# Pattern helpers
# ------------------------------------------------------------------

def initial_pattern(length: int) -> str:
    """Return a fully masked pattern of *length* positions."""
    return PLACEHOLDER * length


def count_occurrences(pattern: str, letter: str) -> int:
    """Number of positions in *pattern* revealed as *letter*."""
    return sum(1 for ch in pattern if ch == letter)


def partition(
    words: Iterable[str],
    pattern: str,
    letter: str,
) -> dict[str, list[str]]:
    """Group *words* by the pattern each would produce if *letter* were revealed.

    Previously revealed positions are kept.  Words without *letter* map to
    *pattern* itself (the miss partition).  Keys appear in the order they
    are first produced while scanning *words*.
    """
    groups: dict[str, list[str]] = {}
    for w in words:
        key = "".join(
            letter if c == letter else p for c, p in zip(w, pattern)
        )
        groups.setdefault(key, []).append(w)
    return groups


def select_partition(partitions: dict[str, list[str]], pattern: str) -> str:
    """Pick the pattern the engine adopts after a guess.

    The running maximum starts at the size of the miss partition (keyed by
    the unchanged *pattern*, 0 if absent) and only a strictly larger
    partition replaces it.  Equal sizes therefore keep the miss, and among
    hits the first partition scanned wins.
    """
    best = pattern
    largest = len(partitions.get(pattern, ()))
    for key, group in partitions.items():
        if len(group) > largest:
            largest = len(group)
            best = key
    return best


def is_consistent(word: str, pattern: str, guessed: Iterable[str]) -> bool:
    """True if *word* could still be the answer given *pattern* and *guessed*.

    Every guessed letter must sit at exactly the positions the pattern
    shows for it and nowhere else; unrevealed positions may hold any
    unguessed letter.
    """
    if len(word) != len(pattern):
        return False
    guessed = set(guessed)
    for c, p in zip(word, pattern):
        if p == PLACEHOLDER:
            if c in guessed:
                return False
        elif c != p:
            return False
    return True


def filter_candidates(
    words: Iterable[str],
    pattern: str,
    guessed: Iterable[str],
) -> list[str]:
    """Keep only the words consistent with *pattern* and *guessed*."""
    guessed = frozenset(guessed)
    return [w for w in words if is_consistent(w, pattern, guessed)]


# ------------------------------------------------------------------
# Game state
# ------------------------------------------------------------------

@dataclass(frozen=True)
class GameState:
    """Snapshot of an engine.  Replaced as a whole by every recorded guess."""

    pattern: str
    words: tuple[str, ...]
    guessed: frozenset[str]
    guesses_left: int
    history: tuple[tuple[str, int], ...] = field(default=())


class EvilHangman:
    """A single game of evil hangman.

    Parameters
    ----------
    dictionary : sequence of str
        All known words, in any length.  Only words of *length* are kept;
        duplicates collapse and dictionary order is preserved.
    length : int
        Word length of this game (>= 1).
    max_guesses : int
        Number of misses allowed (>= 0).

    Raises
    ------
    InvalidArgument
        If *length* < 1 or *max_guesses* < 0.
    """

    def __init__(
        self,
        dictionary: Sequence[str],
        length: int,
        max_guesses: int,
    ) -> None:
        if length < 1 or max_guesses < 0:
            raise InvalidArgument(
                "word length must be >= 1 and max guesses >= 0 "
                f"(got length={length}, max_guesses={max_guesses})"
            )
        words = tuple(dict.fromkeys(w for w in dictionary if len(w) == length))
        self._length = length
        self._max_guesses = max_guesses
        self._state = GameState(
            pattern=initial_pattern(length),
            words=words,
            guessed=frozenset(),
            guesses_left=max_guesses,
        )
        logger.debug("new game: length=%d max_guesses=%d candidates=%d",
                     length, max_guesses, len(words))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def candidate_words(self) -> frozenset[str]:
        return frozenset(self._state.words)

    def guesses_remaining(self) -> int:
        return self._state.guesses_left

    def current_pattern(self) -> str:
        """Current pattern, one symbol per position.

        Raises
        ------
        InvalidState
            If no dictionary word has the requested length.
        """
        if not self._state.words:
            raise InvalidState("no words found")
        return self._state.pattern

    def guessed_letters(self) -> frozenset[str]:
        return self._state.guessed

    def record_guess(self, letter: str) -> int:
        """Record a guess and return how many positions *letter* occupies.

        The engine splits the candidates by the pattern each would show,
        keeps the largest group (the miss group on ties) and costs a guess
        when the kept pattern does not contain *letter*.

        Raises
        ------
        InvalidArgument
            If *letter* is not a single character or was already guessed.
        InvalidState
            If no guesses are left or no candidates remain.
        """
        state = self._state
        if not isinstance(letter, str) or len(letter) != 1 or letter == PLACEHOLDER:
            raise InvalidArgument(f"guess must be a single letter, got {letter!r}")
        if letter in state.guessed:
            raise InvalidArgument(f"letter already guessed: {letter!r}")
        if state.guesses_left < 1 or not state.words:
            raise InvalidState("no guesses available or no candidates remain")

        groups = partition(state.words, state.pattern, letter)
        chosen = select_partition(groups, state.pattern)
        occurrences = count_occurrences(chosen, letter)
        logger.debug("guess %r: %d partition(s), kept %s (%d words)",
                     letter, len(groups), chosen, len(groups[chosen]))

        self._state = replace(
            state,
            pattern=chosen,
            words=tuple(groups[chosen]),
            guessed=state.guessed | {letter},
            guesses_left=state.guesses_left - (0 if occurrences else 1),
            history=state.history + ((letter, occurrences),),
        )
        return occurrences

    def is_solved(self) -> bool:
        """True once every position is revealed."""
        return bool(self._state.words) and PLACEHOLDER not in self._state.pattern

    def game_over(self) -> bool:
        return (
            not self._state.words
            or self._state.guesses_left < 1
            or self.is_solved()
        )

    def reveal(self, rng: random.Random | None = None) -> str:
        """Name one surviving candidate as the word.

        Alphabetically first unless *rng* is given, in which case a random
        candidate is drawn from it.
        """
        if not self._state.words:
            raise InvalidState("no words found")
        if rng is None:
            return min(self._state.words)
        return rng.choice(sorted(self._state.words))

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> list[tuple[str, int]]:
        return list(self._state.history)

    @property
    def word_length(self) -> int:
        return self._length

    @property
    def max_guesses(self) -> int:
        return self._max_guesses
