#!/usr/bin/env python3
"""Play evil hangman in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys

from hangman_env import EvilHangman, HangmanError
from lexicon import load_lexicon


def _ask_letter(engine: EvilHangman, read=input) -> str:
    while True:
        raw = read("Your guess? ").strip().lower()
        if len(raw) != 1 or not raw.isalpha():
            print("Please type a single letter.")
            continue
        if raw in engine.guessed_letters():
            print("You already guessed that.")
            continue
        return raw


def play(engine: EvilHangman, read=input, show_count: bool = False) -> bool:
    """Run the guessing loop until the game ends. Return True on a win."""
    while not engine.game_over():
        print()
        print(f"guesses : {engine.guesses_remaining()}")
        print(f"guessed : {' '.join(sorted(engine.guessed_letters()))}")
        print(f"current : {engine.current_pattern()}")
        if show_count:
            print(f"({len(engine.candidate_words())} words possible)")

        letter = _ask_letter(engine, read)
        try:
            hits = engine.record_guess(letter)
        except HangmanError as exc:
            print(f"Cannot record {letter!r}: {exc}", file=sys.stderr)
            return False
        if hits == 0:
            print(f"Sorry, there are no {letter}'s")
        elif hits == 1:
            print(f"Yes, there is one {letter}")
        else:
            print(f"Yes, there are {hits} {letter}'s")

    print()
    word = engine.reveal()
    if engine.is_solved():
        print(f"You beat me: {word}")
        return True
    print(f"Sorry, you lose, the word was {word}")
    return False


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play evil hangman")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, default=5, help="Word length (default: 5)")
    parser.add_argument("--max-guesses", type=int, default=8, help="Misses allowed (default: 8)")
    parser.add_argument("--show-count", action="store_true",
                        help="Show how many words are still possible")
    parser.add_argument("--debug", action="store_true", help="Log engine decisions")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    lex = load_lexicon(path=args.words)
    try:
        engine = EvilHangman(lex.words, args.length, args.max_guesses)
    except HangmanError as exc:
        print(f"Cannot start game: {exc}", file=sys.stderr)
        sys.exit(2)
    if not engine.candidate_words():
        print(f"No {args.length}-letter words in {lex.source}", file=sys.stderr)
        sys.exit(1)

    print("Welcome to the hangman game.")
    try:
        play(engine, show_count=args.show_count)
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
