"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    SNAKE_COLOR_PAIRS,
    BoardLayout,
    Ladder,
    Snake,
    column_of,
    row_of,
)


# ── rows / columns ───────────────────────────────────────────────────

def test_row_of():
    assert row_of(1) == 0
    assert row_of(10) == 0
    assert row_of(11) == 1
    assert row_of(100) == 9


def test_column_zig_zags():
    assert column_of(1) == 0
    assert column_of(10) == 9
    assert column_of(11) == 9    # second row runs right-to-left
    assert column_of(20) == 0
    assert column_of(21) == 0


def test_off_board_square_rejected():
    with pytest.raises(ValueError):
        row_of(0)
    with pytest.raises(ValueError):
        column_of(101)


# ── Ladder / Snake ───────────────────────────────────────────────────

def test_ladder_must_climb():
    with pytest.raises(ValueError):
        Ladder(start=50, end=10)


def test_snake_must_descend():
    with pytest.raises(ValueError):
        Snake(head=10, tail=50)


def test_snake_default_colors():
    assert Snake(head=60, tail=5).colors == SNAKE_COLOR_PAIRS[0]


# ── BoardLayout ──────────────────────────────────────────────────────

def test_empty_layout_has_no_destinations():
    layout = BoardLayout.empty()
    assert layout.destinations == {}
    assert layout.destination(50) is None


def test_destinations_combine_snakes_and_ladders():
    layout = BoardLayout(
        ladders=(Ladder(10, 50),),
        snakes=(Snake(95, 40),),
    )
    assert layout.destinations == {10: 50, 95: 40}
    assert layout.is_ladder(10) is True
    assert layout.is_snake(95) is True
    assert layout.is_ladder(95) is False
    assert layout.is_snake(50) is False


def test_two_movers_cannot_share_a_start():
    with pytest.raises(ValueError):
        BoardLayout(ladders=(Ladder(30, 70),), snakes=(Snake(30, 5),))


def test_layout_accepts_lists():
    layout = BoardLayout(ladders=[Ladder(10, 50)], snakes=[])
    assert layout.ladders == (Ladder(10, 50),)


def test_layout_is_frozen():
    layout = BoardLayout.empty()
    with pytest.raises(AttributeError):
        layout.ladders = (Ladder(10, 50),)
