import pytest
from apps.cli.play import play_game, main
from packages.engine import HangmanManager


def _scripted(answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_play_game_win():
    out = []
    m = HangmanManager(["hello"], 5, 3)
    won = play_game(m, ask=_scripted(["h", "x", "E", "l", "l", "??", "o"]), out=out.append)
    assert won is True
    assert "Sorry, there are no x's" in out
    assert "Yes, there are 2 l's" in out
    assert "You already guessed 'l'." in out
    assert "Please enter a single letter a-z." in out
    assert out[-1] == "You beat me! The word was 'hello'."
    assert m.guesses_left() == 2


def test_play_game_loss_reveals_a_remaining_word():
    out = []
    m = HangmanManager(["aa", "bb", "cc"], 2, 2)
    won = play_game(m, ask=_scripted(["a", "b"]), show_count=True, out=out.append)
    assert won is False
    assert "words left  : 3" in out
    assert out[-1] == "Game over. The word was 'cc'."


def test_play_game_quit():
    out = []
    m = HangmanManager(["aa", "bb"], 2, 2)
    assert play_game(m, ask=_scripted(["quit"]), out=out.append) is False
    assert "Giving up." in out


def test_main_rejects_bad_length(tmp_path):
    d = tmp_path / "words.txt"
    d.write_text("cat\ndog\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Cannot start a game"):
        main(["--dictionary", str(d), "--length", "9"])
