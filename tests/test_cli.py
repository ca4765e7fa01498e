"""Tests for the terminal front end in snakes_ladders.__main__."""

import io
from types import SimpleNamespace

import pytest

from snakes_ladders.__main__ import (
    PrintObserver,
    cmd_board,
    cmd_chart,
    cmd_play,
    cmd_simulate,
    format_layout,
)
from snakes_ladders.board import BoardLayout, Ladder, Snake
from snakes_ladders.game import GameEvent


def test_format_layout_sorts_entries():
    layout = BoardLayout(
        ladders=(Ladder(30, 70), Ladder(4, 25)),
        snakes=(Snake(95, 40),),
    )
    text = format_layout(layout)
    assert text.splitlines() == [
        "Ladders (2):",
        "    4 → 25",
        "   30 → 70",
        "Snakes (1):",
        "   95 → 40",
    ]


def test_print_observer():
    out = io.StringIO()
    observer = PrintObserver(out=out)
    observer.on_event(GameEvent(kind="dice", player=0, message="Player Blue rolled 2 and 3."))
    observer.on_event(GameEvent(kind="step", player=0, square=5))
    observer.on_event(GameEvent(kind="snake", player=0, square=2))
    assert out.getvalue().splitlines() == [
        "Player Blue rolled 2 and 3.",
        "  … 5",
        "  … snake! → 2",
    ]


def test_board_command_is_seeded(capsys):
    cmd_board(SimpleNamespace(seed=4))
    first = capsys.readouterr().out
    cmd_board(SimpleNamespace(seed=4))
    second = capsys.readouterr().out
    assert first == second
    assert first.startswith("Ladders (")


def test_simulate_command_prints_stats(capsys):
    cmd_simulate(SimpleNamespace(games=3, players=2, seed=1))
    out = capsys.readouterr().out
    assert "games" in out
    assert "mean rolls" in out
    assert "mean ladders climbed" in out
    assert "mean snakes hit" in out


@pytest.mark.parametrize("games, players", [(0, 2), (-3, 2), (5, 0), (5, 5)])
def test_simulate_command_rejects_bad_arguments(capsys, games, players):
    with pytest.raises(SystemExit) as exc:
        cmd_simulate(SimpleNamespace(games=games, players=players, seed=1))
    assert exc.value.code == 1
    assert capsys.readouterr().err


@pytest.mark.parametrize("games, players", [(0, 2), (5, 0), (5, 5)])
def test_chart_command_rejects_bad_arguments(tmp_path, capsys, games, players):
    out = tmp_path / "lengths.png"
    with pytest.raises(SystemExit) as exc:
        cmd_chart(SimpleNamespace(games=games, players=players, seed=1, output=str(out)))
    assert exc.value.code == 1
    assert capsys.readouterr().err
    assert not out.exists()


def test_chart_command_writes_png(tmp_path, capsys):
    out = tmp_path / "lengths.png"
    cmd_chart(SimpleNamespace(games=5, players=2, seed=2, output=str(out)))
    assert out.exists()
    assert f"Chart saved to {out}" in capsys.readouterr().out


# ── interactive play ─────────────────────────────────────────────────

def _scripted_input(monkeypatch, answers):
    prompts = []
    remaining = iter(answers)

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(remaining)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_play_command_roll_reset_menu_and_restart(monkeypatch, capsys):
    # roll, reset the board, back to the menu, start with 3 players, roll, quit
    prompts = _scripted_input(monkeypatch, ["", "r", "m", "3", "", "q"])
    cmd_play(SimpleNamespace(players=2, seed=1, delay=0.0))
    out = capsys.readouterr().out

    assert len(prompts) == 6
    assert prompts[3].startswith("Number of players")
    assert "rolled" in out
    assert "The game board has been reset!" in out
    assert "Welcome!" in out
    assert out.count("Game started!") == 2
    assert "Green=0" in prompts[4]
    assert "Yellow" not in prompts[4]


def test_play_command_rejects_bad_player_count(monkeypatch, capsys):
    _scripted_input(monkeypatch, ["m", "7", "q"])
    cmd_play(SimpleNamespace(players=2, seed=1, delay=0.0))
    assert "Choose between 1 and 4 players." in capsys.readouterr().err
