#!/usr/bin/env python3
"""Pit every built-in strategy against the evil hangman engine.

All strategies play the same games: the same seed draws the same word
lengths and dictionaries for each of them.  Strategies run in parallel,
one process each.  Standings rank by games solved, then fewest misses.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import os
import sys
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from statistics import mean

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def _play_strategy(
    cls_name: str,
    vocabulary: list[str],
    lengths: list[int],
    max_guesses: int,
    num_games: int,
    seed: int,
    sample: float,
) -> tuple[str, list[dict]]:
    """Run one strategy's experiment. Executed in a subprocess."""
    code_dir = str(Path(__file__).resolve().parent)
    if code_dir not in sys.path:
        sys.path.insert(0, code_dir)

    from experiment import run_experiment
    from strategies import discover_strategies

    by_name = {cls.__name__: cls for cls in discover_strategies()}
    if cls_name not in by_name:
        raise RuntimeError(f"Built-in strategy class {cls_name} not found")
    strat = by_name[cls_name]()
    logs = run_experiment(strat, vocabulary, lengths, max_guesses=max_guesses,
                          num_games=num_games, seed=seed, sample=sample)
    for g in logs:
        del g["steps"]
    return strat.name, logs


def run_tournament(
    vocabulary: list[str],
    lengths: list[int],
    max_guesses: int = 8,
    num_games: int = 10,
    seed: int = 42,
    sample: float = 0.8,
    max_workers: int | None = None,
) -> dict[str, list[dict]]:
    """Return per-strategy game logs (without per-guess steps)."""
    from strategies import discover_strategies

    cls_names = [cls.__name__ for cls in discover_strategies()]
    if not cls_names:
        print("No strategies found.", file=sys.stderr)
        return {}
    if max_workers is None:
        max_workers = min(len(cls_names), os.cpu_count() or 1)

    print(f"Running {len(cls_names)} strategies x {num_games} games "
          f"(workers: {max_workers}) ...", flush=True)

    games: dict[str, list[dict]] = {}
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_play_strategy, name, vocabulary, lengths,
                            max_guesses, num_games, seed, sample): name
            for name in cls_names
        }
        for fut in as_completed(futures):
            try:
                name, logs = fut.result()
            except Exception as exc:
                print(f"  {futures[fut]} FAILED: {exc}", file=sys.stderr)
                continue
            games[name] = logs
            won = sum(g["solved"] for g in logs)
            print(f"  {name}: solved {won}/{len(logs)}")
    return games


def standings(games: dict[str, list[dict]]) -> list[dict]:
    """Rank strategies by games solved (desc), then mean misses (asc), then name."""
    rows = []
    for name, logs in games.items():
        if not logs:
            continue
        rows.append({
            "strategy": name,
            "games": len(logs),
            "solved": sum(1 for g in logs if g["solved"]),
            "mean_misses": round(mean(g["misses"] for g in logs), 3),
            "mean_guesses": round(mean(g["num_guesses"] for g in logs), 3),
        })
    rows.sort(key=lambda r: (-r["solved"], r["mean_misses"], r["strategy"]))
    for place, row in enumerate(rows, 1):
        row["place"] = place
    return rows


def print_standings(rows: list[dict]) -> None:
    print(f"\n  {'#':<3}{'Strategy':<14}{'Solved':>10}{'Misses':>9}{'Guesses':>9}")
    for r in rows:
        solved = f"{r['solved']}/{r['games']}"
        print(f"  {r['place']:<3}{r['strategy']:<14}{solved:>10}"
              f"{r['mean_misses']:>9.2f}{r['mean_guesses']:>9.2f}")
    print()


def write_games_csv(games: dict[str, list[dict]], path: str | Path) -> None:
    """One row per (strategy, game)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fields = ["strategy", "game", "word_length", "dictionary_size", "word",
              "num_guesses", "misses", "solved"]
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fields, extrasaction="ignore")
        writer.writeheader()
        for name in sorted(games):
            for g in games[name]:
                writer.writerow({**g, "strategy": name, "solved": int(g["solved"])})


def plot_misses(games: dict[str, list[dict]], path: str | Path) -> None:
    """Box plot of misses per game, one box per strategy."""
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed — skipping plot", file=sys.stderr)
        return

    names = sorted(n for n in games if games[n])
    if not names:
        return
    fig, ax = plt.subplots(figsize=(1.8 * len(names) + 2, 4))
    ax.boxplot([[g["misses"] for g in games[n]] for n in names])
    ax.set_xticks(range(1, len(names) + 1), names)
    ax.set_ylabel("Misses")
    ax.set_title("Misses per game against evil hangman")
    fig.tight_layout()
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Evil hangman strategy tournament")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, nargs="+", default=None,
                        help="Word lengths to draw from (default: all in the list)")
    parser.add_argument("--max-guesses", type=int, default=8, help="Misses allowed per game")
    parser.add_argument("--num-games", type=int, default=10, help="Games per strategy")
    parser.add_argument("--seed", type=int, default=42, help="Random seed shared by all strategies")
    parser.add_argument("--sample", type=float, default=0.8,
                        help="Fraction of the words used in each game (default: 0.8)")
    parser.add_argument("--workers", type=int, default=None, help="Max parallel workers")
    parser.add_argument("--out", type=str, default=None,
                        help="Output directory (default: results/)")
    parser.add_argument("--debug", action="store_true", help="Log engine decisions")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    from lexicon import load_lexicon

    lex = load_lexicon(path=args.words)
    lengths = args.length or list(lex.lengths())
    missing = [n for n in lengths if n not in lex.lengths()]
    if missing:
        print(f"No words of length {missing} in {lex.source}", file=sys.stderr)
        sys.exit(1)

    games = run_tournament(
        vocabulary=lex.words,
        lengths=lengths,
        max_guesses=args.max_guesses,
        num_games=args.num_games,
        seed=args.seed,
        sample=args.sample,
        max_workers=args.workers,
    )
    rows = standings(games)
    print_standings(rows)

    out_dir = Path(args.out) if args.out else RESULTS_DIR
    write_games_csv(games, out_dir / "tournament.csv")
    plot_misses(games, out_dir / "tournament.png")
    data = {
        "config": {
            "lengths": lengths,
            "max_guesses": args.max_guesses,
            "num_games": args.num_games,
            "seed": args.seed,
            "sample": args.sample,
        },
        "standings": rows,
        "games": games,
    }
    json_path = out_dir / "tournament.json"
    json_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Results saved to {out_dir}")


if __name__ == "__main__":
    main()
