from hangman_env import EvilHangman
from play import play


def _reader(answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_win(capsys):
    engine = EvilHangman(["bat", "cat", "hat", "dog"], 3, 8)
    assert play(engine, read=_reader(["a", "t", "b", "c", "h"])) is True
    out = capsys.readouterr().out
    assert "Yes, there is one a" in out
    assert "Sorry, there are no b's" in out
    assert "You beat me: hat" in out


def test_lose_and_rejects_bad_input(capsys):
    engine = EvilHangman(["aa", "bb", "cc"], 2, 2)
    answers = ["a", "ab", "A", "7", "b"]
    assert play(engine, read=_reader(answers), show_count=True) is False
    out = capsys.readouterr().out
    assert "Please type a single letter." in out
    assert "You already guessed that." in out
    assert "(3 words possible)" in out
    assert "the word was cc" in out
