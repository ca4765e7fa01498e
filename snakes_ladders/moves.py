"""Dice-driven movement: path, bounce-back and snake/ladder redirection."""

from __future__ import annotations

from dataclasses import dataclass, field

from snakes_ladders.board import BOARD_SIZE, DICE_SIDES, BoardLayout


@dataclass
class MoveResult:
    """What happens to a token after one roll."""

    dice: tuple[int, int]
    path: list[int] = field(default_factory=list)
    landing_square: int = 0  # end of the path, before any snake/ladder
    final_square: int = 0
    redirect_kind: str = "none"  # "none" | "snake" | "ladder"

    @property
    def total(self) -> int:
        return self.dice[0] + self.dice[1]

    @property
    def redirected(self) -> bool:
        return self.redirect_kind != "none"

    @property
    def bounced(self) -> bool:
        return BOARD_SIZE in self.path[:-1]

    @property
    def doubles(self) -> bool:
        return self.dice[0] == self.dice[1]

    @property
    def won(self) -> bool:
        return self.final_square == BOARD_SIZE


def _check_dice(dice: tuple[int, int]) -> None:
    if len(dice) != 2:
        raise ValueError(f"Expected two dice, got {dice!r}.")
    for face in dice:
        if not isinstance(face, int) or not 1 <= face <= DICE_SIDES:
            raise ValueError(f"Die value {face!r} is outside 1–{DICE_SIDES}.")


def move_path(current: int, total: int) -> list[int]:
    """Squares visited one step at a time, reflecting back off square 100."""
    path = []
    for i in range(1, total + 1):
        if current + i <= BOARD_SIZE:
            path.append(current + i)
        else:
            path.append(BOARD_SIZE - (i - (BOARD_SIZE - current)))
    return path


def resolve_move(current: int, dice: tuple[int, int], layout: BoardLayout) -> MoveResult:
    """Compute where a token on *current* ends up after rolling *dice*.

    A token in the holding area (square 0) enters the board on the square
    matching the dice total. Only the landing square is checked against
    *layout*: a snake or ladder that drops the token onto another one's
    start is not followed further.

    Does NOT touch any game state; the caller commits the result.
    """
    _check_dice(dice)
    if not 0 <= current < BOARD_SIZE:
        raise ValueError(f"Cannot move a token from square {current}.")

    dice = (dice[0], dice[1])
    path = move_path(current, dice[0] + dice[1])
    landing = path[-1]

    if layout.is_ladder(landing):
        kind = "ladder"
    elif layout.is_snake(landing):
        kind = "snake"
    else:
        return MoveResult(dice=dice, path=path, landing_square=landing, final_square=landing)

    return MoveResult(
        dice=dice,
        path=path,
        landing_square=landing,
        final_square=layout.destination(landing),
        redirect_kind=kind,
    )


def next_player(current_player: int, number_of_players: int, dice: tuple[int, int]) -> int:
    """Doubles earn another roll; anything else passes the turn on."""
    if dice[0] == dice[1]:
        return current_player
    return (current_player + 1) % number_of_players
