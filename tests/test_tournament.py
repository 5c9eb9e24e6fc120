import csv
import json

import tournament
from tournament import _play_strategy, standings, write_games_csv


def _log(game, misses, solved=True):
    return {"game": game, "word_length": 4, "dictionary_size": 10, "word": "word",
            "num_guesses": misses + 4, "misses": misses, "solved": solved}


def test_play_strategy_in_process_drops_steps():
    name, logs = _play_strategy("FrequencyStrategy", ["aa", "bb", "cc"], [2], 2, 3, 0, 1.0)
    assert name == "Frequency"
    assert len(logs) == 3
    assert all("steps" not in g for g in logs)
    assert all(g["misses"] == 2 and not g["solved"] for g in logs)


def test_strategies_share_the_same_games():
    words = ["bat", "cat", "hat", "dog", "cog", "fog", "log", "bag"]
    _, freq = _play_strategy("FrequencyStrategy", words, [3], 8, 4, 9, 0.5)
    _, ent = _play_strategy("EntropyStrategy", words, [3], 8, 4, 9, 0.5)
    assert [g["dictionary_size"] for g in freq] == [g["dictionary_size"] for g in ent]


def test_standings_rank_solved_then_misses():
    games = {
        "Slow": [_log(1, 5), _log(2, 6)],
        "Fast": [_log(1, 1), _log(2, 3)],
        "Lost": [_log(1, 0, solved=False), _log(2, 0)],
        "Empty": [],
    }
    rows = standings(games)
    assert [r["strategy"] for r in rows] == ["Fast", "Slow", "Lost"]
    assert [r["place"] for r in rows] == [1, 2, 3]
    assert rows[0] == {"strategy": "Fast", "games": 2, "solved": 2,
                       "mean_misses": 2.0, "mean_guesses": 6.0, "place": 1}


def test_write_games_csv(tmp_path):
    path = tmp_path / "sub" / "t.csv"
    write_games_csv({"B": [_log(1, 2)], "A": [_log(1, 1, solved=False)]}, path)
    with path.open(encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["strategy", "game", "word_length", "dictionary_size", "word",
                       "num_guesses", "misses", "solved"]
    assert rows[1] == ["A", "1", "4", "10", "word", "5", "1", "0"]
    assert rows[2][0] == "B"


def test_print_standings(capsys):
    tournament.print_standings(standings({"Fast": [_log(1, 1)], "Slow": [_log(1, 4)]}))
    out = capsys.readouterr().out
    assert out.index("Fast") < out.index("Slow")
    assert "1/1" in out


def test_main_writes_outputs(tmp_path, monkeypatch):
    def fake_run_tournament(**kwargs):
        return {"Frequency": [_log(1, 2)]}

    monkeypatch.setattr(tournament, "run_tournament", fake_run_tournament)
    tournament.main(["--length", "4", "--out", str(tmp_path)])
    data = json.loads((tmp_path / "tournament.json").read_text(encoding="utf-8"))
    assert data["standings"][0]["strategy"] == "Frequency"
    assert data["config"]["lengths"] == [4]
    assert (tmp_path / "tournament.csv").exists()
    assert (tmp_path / "tournament.png").exists()
