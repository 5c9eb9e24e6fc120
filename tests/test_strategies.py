from strategies import discover_strategies
from strategies.entropy_strat import EntropyStrategy
from strategies.frequency_strat import FrequencyStrategy
from strategies.random_strat import RandomStrategy
from strategy import GameConfig


def _config(words, max_guesses=6):
    return GameConfig(
        word_length=len(words[0]),
        vocabulary=tuple(words),
        max_guesses=max_guesses,
    )


def test_discovers_builtin_strategies():
    names = {cls().name for cls in discover_strategies()}
    assert names == {"Random", "Frequency", "Entropy"}


def test_random_never_repeats():
    strat = RandomStrategy(seed=1)
    strat.begin_game(_config(["bat", "cat"]))
    guessed = frozenset("abcdefghijklmnopqrstuvwxy")
    assert strat.guess("---", guessed) == "z"
    seen = set()
    for _ in range(26):
        letter = strat.guess("---", frozenset(seen))
        assert letter not in seen
        seen.add(letter)
    assert len(seen) == 26


def test_random_is_reproducible_with_seed():
    a, b = RandomStrategy(seed=7), RandomStrategy(seed=7)
    for s in (a, b):
        s.begin_game(_config(["bat"]))
    assert [a.guess("---", frozenset()) for _ in range(5)] == \
           [b.guess("---", frozenset()) for _ in range(5)]


def test_frequency_picks_most_common_letter():
    strat = FrequencyStrategy()
    strat.begin_game(_config(["bat", "cat", "hat", "dog"]))
    # 'a' and 't' both appear in three words; alphabetical tie-break
    assert strat.guess("---", frozenset()) == "a"
    assert strat.guess("-a-", frozenset("a")) == "t"


def test_frequency_falls_back_to_alphabet():
    strat = FrequencyStrategy()
    strat.begin_game(_config(["bat"]))
    assert strat.guess("---", frozenset("abt")) == "c"


def test_entropy_prefers_even_split():
    strat = EntropyStrategy()
    strat.begin_game(_config(["ax", "ay", "bz", "bw"]))
    assert strat.guess("--", frozenset()) == "a"
    # after a miss on 'a' only "bz" and "bw" remain
    assert strat.guess("--", frozenset("a")) == "w"


def test_entropy_finishes_last_word():
    strat = EntropyStrategy()
    strat.begin_game(_config(["dog", "cat"]))
    assert strat.guess("-o-", frozenset("o")) == "d"
