"""
Tests for the console front-end.
"""

import json
import logging

import pytest

import tictactoe.main as console
from tictactoe.logic import Difficulty, GameMode, GameSession, Scoreboard


def scripted(*lines):
    """Input function that replays lines, then signals end of input."""
    pending = list(lines)

    def read(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(console, "setup_logging", lambda: None)


def test_two_player_draw_is_shown_and_saved(tmp_path, capsys):
    path = tmp_path / "scores.json"
    game = console.ConsoleGame(
        GameSession(GameMode.PVP),
        scores_path=path,
        input_fn=scripted("1", "2", "3", "5", "4", "6", "8", "7", "9", "n"),
    )

    game.start()

    out = capsys.readouterr().out
    assert "Two players" in out
    assert "It's a Draw!" in out
    assert "Draws: 1" in out
    assert json.loads(path.read_text())["draws"] == 1


def test_bad_input_is_reported_and_ignored(capsys):
    session = GameSession(GameMode.PVP)
    game = console.ConsoleGame(session, input_fn=scripted("abc", "1", "1", "10", "q"))

    game.start()

    out = capsys.readouterr().out
    assert "Please enter a number from 1 to 9." in out
    assert "Invalid move" in out
    assert "Game quit." in out
    assert session.board.empty_cells() == list(range(1, 9))


def test_restart_command_clears_board():
    session = GameSession(GameMode.PVP)
    game = console.ConsoleGame(session, input_fn=scripted("5", "r", "q"))

    game.start()

    assert session.board.empty_cells() == list(range(9))


def test_computer_wins_against_careless_player(tmp_path, capsys):
    delays = []
    session = GameSession(GameMode.AI, Difficulty.HARD)
    game = console.ConsoleGame(
        session,
        scores_path=tmp_path / "scores.json",
        thinking_delay=0.5,
        input_fn=scripted("1", "2", "9"),
        sleep_fn=delays.append,
    )

    game.start()

    out = capsys.readouterr().out
    assert "Computer plays 5" in out
    assert "Computer plays 3" in out
    assert "Computer plays 7" in out
    assert "Computer Wins!" in out
    assert delays == [0.5, 0.5, 0.5]
    assert session.scoreboard.ai_wins == 1


def test_play_again_starts_a_new_game(capsys):
    session = GameSession(GameMode.PVP)
    game = console.ConsoleGame(
        session,
        input_fn=scripted("1", "4", "2", "5", "3", "y", "5", "q"),
    )

    game.start()

    assert session.scoreboard.player_wins == 1
    assert session.board.cells[4] is not None
    assert session.is_active


def test_main_quits_cleanly(tmp_path, monkeypatch, capsys):
    path = tmp_path / "scores.json"
    Scoreboard(player_wins=4).save(path)
    monkeypatch.setattr("builtins.input", scripted("q"))

    assert console.main(["--mode", "ai", "--difficulty", "medium", "--no-delay", "--scores", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Against the computer (medium)" in out
    assert "Goodbye!" in out
    assert json.loads(path.read_text())["playerWins"] == 4


def test_main_reset_stats(tmp_path, monkeypatch):
    path = tmp_path / "scores.json"
    Scoreboard(player_wins=4, ai_wins=2, draws=1).save(path)
    monkeypatch.setattr("builtins.input", scripted())

    assert console.main(["--reset-stats", "--scores", str(path)]) == 0

    assert Scoreboard.load(path) == Scoreboard()


def test_main_computer_first(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted("q"))

    console.main(["--mode", "ai", "--difficulty", "hard", "--computer-first",
                  "--no-delay", "--scores", str(tmp_path / "s.json")])

    assert "Computer plays 1" in capsys.readouterr().out


def test_main_rejects_unknown_difficulty(capsys):
    with pytest.raises(SystemExit):
        console.main(["--difficulty", "impossible"])


@pytest.mark.parametrize("setting, value, variable", [
    ("DEFAULT_DIFFICULTY", "bogus", "TTT_DIFFICULTY"),
    ("DEFAULT_MODE", "AI", "TTT_MODE"),
])
def test_main_rejects_bad_configured_default(monkeypatch, capsys, setting, value, variable):
    monkeypatch.setattr(console.GameConfig, setting, value)

    with pytest.raises(SystemExit) as exc_info:
        console.main(["--no-delay"])

    assert exc_info.value.code == 2
    assert variable in capsys.readouterr().err


def test_main_reset_stats_on_unwritable_path(tmp_path, monkeypatch, caplog):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    monkeypatch.setattr("builtins.input", scripted("q"))

    with caplog.at_level(logging.WARNING):
        assert console.main(["--reset-stats", "--scores", str(blocker / "scores.json")]) == 0

    assert "Could not save scores" in caplog.text
