#!/usr/bin/env python3
"""Run a single strategy against the evil hangman engine with per-game output."""

from __future__ import annotations

import argparse
import json
import logging
import math
import random
import sys
from pathlib import Path

from hangman_env import EvilHangman
from lexicon import load_lexicon
from strategy import Strategy, GameConfig
from strategies import discover_strategies

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


def _find_strategy(name: str) -> type[Strategy]:
    classes = discover_strategies()
    for cls in classes:
        if cls().name.lower() == name.lower():
            return cls
    available = [cls().name for cls in classes]
    print(f"Strategy '{name}' not found. Available: {available}", file=sys.stderr)
    sys.exit(1)


def play_game(
    strat: Strategy,
    vocabulary: list[str],
    word_length: int,
    max_guesses: int,
    verbose: bool = False,
) -> dict:
    """Play one game of *strat* against a fresh engine and return its log."""
    engine = EvilHangman(vocabulary, word_length, max_guesses)
    words = sorted(engine.candidate_words())
    strat.begin_game(GameConfig(
        word_length=word_length,
        vocabulary=tuple(words),
        max_guesses=max_guesses,
    ))

    steps: list[dict] = []
    while not engine.game_over():
        letter = strat.guess(engine.current_pattern(), engine.guessed_letters())
        hits = engine.record_guess(letter)
        remaining = len(engine.candidate_words())
        step = {
            "letter": letter,
            "occurrences": hits,
            "pattern": engine.current_pattern(),
            "remaining": remaining,
            "guesses_left": engine.guesses_remaining(),
            "entropy_bits": round(_entropy_bits(remaining), 3),
        }
        steps.append(step)
        if verbose:
            print(
                f"  Guess {len(steps)}: {letter}  {step['pattern']}  "
                f"hits={hits}  remaining={remaining}  "
                f"left={step['guesses_left']}"
            )

    solved = engine.is_solved()
    misses = max_guesses - engine.guesses_remaining()
    word = engine.reveal() if engine.candidate_words() else ""
    strat.end_game(word, solved, misses)
    return {
        "word_length": word_length,
        "word": word,
        "solved": solved,
        "num_guesses": len(steps),
        "misses": misses,
        "steps": steps,
    }


def draw_dictionary(
    vocabulary: list[str],
    length: int,
    sample: float,
    rng: random.Random,
) -> list[str]:
    """Random subset of the *length*-letter words, in shuffled order.

    *sample* is the fraction of words kept (at least one).
    """
    pool = [w for w in vocabulary if len(w) == length]
    if not pool:
        return []
    k = max(1, round(len(pool) * sample))
    return rng.sample(pool, k)


def run_experiment(
    strat: Strategy,
    vocabulary: list[str],
    lengths: list[int],
    max_guesses: int = 8,
    num_games: int = 10,
    seed: int = 42,
    sample: float = 0.8,
    verbose: bool = False,
) -> list[dict]:
    """Play *num_games* games, drawing a length from *lengths* and a dictionary per game."""
    if not 0 < sample <= 1:
        raise ValueError(f"sample must be in (0, 1], got {sample}")
    rng = random.Random(seed)
    logs: list[dict] = []
    for i in range(1, num_games + 1):
        length = rng.choice(lengths)
        words = draw_dictionary(vocabulary, length, sample, rng)
        if verbose:
            print(f"\n--- Game {i}/{num_games} | Length: {length} | Words: {len(words)} ---")
        result = play_game(strat, words, length, max_guesses, verbose=verbose)
        result["game"] = i
        result["dictionary_size"] = len(words)
        logs.append(result)
        if verbose:
            status = "SOLVED" if result["solved"] else "FAILED"
            print(f"  -> {status} ({result['word']}) with {result['misses']} misses")
    return logs


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    n = len(logs)
    if not n:
        print(f"\n=== {strategy_name} — no games ===")
        return
    solved = sum(1 for g in logs if g["solved"])
    guesses = sorted(g["num_guesses"] for g in logs)
    mean = sum(guesses) / n
    median = (
        guesses[n // 2]
        if n % 2 == 1
        else (guesses[n // 2 - 1] + guesses[n // 2]) / 2
    )
    print(f"\n=== {strategy_name} — {n} games ===")
    print(f"  Solved: {solved}/{n} ({100 * solved / n:.1f}%)")
    print(f"  Guesses — mean: {mean:.2f}, median: {median:.1f}, max: {max(guesses)}")


def plot_distribution(logs: list[dict], strategy_name: str, path: Path | None = None) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed — skipping plot", file=sys.stderr)
        return

    misses = [g["misses"] for g in logs]
    mx = max(misses) if misses else 1
    bins = list(range(0, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(misses, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} — misses per game")
    ax.set_xlabel("Misses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / f"experiment_{strategy_name.lower()}.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Single-strategy evil hangman experiment")
    parser.add_argument("--strategy", type=str, required=True, help="Strategy name")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, nargs="+", default=None,
                        help="Word length(s) to draw from (default: all in the list)")
    parser.add_argument("--max-guesses", type=int, default=8, help="Misses allowed per game")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--sample", type=float, default=0.8,
                        help="Fraction of the words used in each game (default: 0.8)")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--debug", action="store_true", help="Log engine decisions")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    lex = load_lexicon(path=args.words)
    lengths = args.length or list(lex.lengths())
    missing = [n for n in lengths if n not in lex.lengths()]
    if missing:
        print(f"No words of length {missing} in {lex.source}", file=sys.stderr)
        sys.exit(1)
    print(f"Vocabulary: {len(lex.words)} words, lengths {lengths}")

    cls = _find_strategy(args.strategy)
    strat = cls()
    print(f"Strategy: {strat.name}")

    logs = run_experiment(
        strat=strat,
        vocabulary=lex.words,
        lengths=lengths,
        max_guesses=args.max_guesses,
        num_games=args.num_games,
        seed=args.seed,
        sample=args.sample,
        verbose=args.verbose,
    )

    print_experiment_summary(logs, strat.name)

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    plot_path = Path(args.plot) if args.plot else RESULTS_DIR / f"experiment_{strat.name.lower()}.png"
    plot_distribution(logs, strat.name, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{strat.name.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    n = len(logs)
    output = {
        "strategy": strat.name,
        "config": {
            "lengths": lengths,
            "max_guesses": args.max_guesses,
            "num_games": args.num_games,
            "seed": args.seed,
            "sample": args.sample,
        },
        "summary": {
            "games": n,
            "solved": sum(1 for g in logs if g["solved"]),
            "solve_rate": round(sum(1 for g in logs if g["solved"]) / n, 4) if n else 0,
            "mean_misses": round(sum(g["misses"] for g in logs) / n, 3) if n else 0,
        },
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
