"""Game session: turn order, doubles, win detection and board resets."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from snakes_ladders.board import (
    DICE_SIDES,
    MAX_PLAYERS,
    PLAYER_COLOR_NAMES,
    BoardLayout,
)
from snakes_ladders.generator import BoardGenerator
from snakes_ladders.moves import MoveResult, next_player, resolve_move

WELCOME_MESSAGE = 'Welcome! Select the number of players and click "Start Game".'


class Phase(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# ── Structured types ────────────────────────────────────────────────

@dataclass
class GameEvent:
    """One thing that happened, for whoever draws or sounds the game.

    kind is one of "started" | "board_reset" | "menu" | "dice" | "step" |
    "ladder" | "snake" | "turn" | "extra_turn" | "win".
    """

    kind: str
    player: int
    square: int | None = None
    dice: tuple[int, int] | None = None
    message: str = ""


@dataclass
class CommandResult:
    ok: bool = True
    message: str = ""
    move: MoveResult | None = None


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives events as a game is played."""

    def on_event(self, event: GameEvent) -> None: ...


@dataclass
class ListObserver:
    """Default observer, collects events into a list."""

    events: list[GameEvent] = field(default_factory=list)

    def on_event(self, event: GameEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]


class BoardSource(Protocol):
    def generate(self) -> BoardLayout: ...


# ── Session ──────────────────────────────────────────────────────────

class GameSession:
    """State of one table: layout, token positions and whose turn it is.

    Every command returns a :class:`CommandResult`; commands that don't make
    sense right now come back with ``ok=False`` and change nothing.

    A roll runs to completion inside :meth:`roll_dice`, handing each step to
    the observer as it goes. Observers may pace those steps however they
    like. While a roll is in flight the session is ``busy``: further rolls
    and board resets are refused, while :meth:`start` and
    :meth:`return_to_menu` abandon the roll.
    """

    def __init__(
        self,
        generator: BoardSource | None = None,
        rng: Any = None,
        observer: GameObserver | None = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.generator = generator or BoardGenerator(self.rng)
        self.observer = observer or ListObserver()

        self.phase = Phase.NOT_STARTED
        self.number_of_players = 2
        self.positions: list[int] = [0] * self.number_of_players
        self.current_player = 0
        self.layout: BoardLayout | None = None
        self.last_dice: tuple[int, int] | None = None
        self.message = WELCOME_MESSAGE
        self.busy = False
        # Bumped by start/return_to_menu so an in-flight roll knows to stop
        self._epoch = 0

    @property
    def winner(self) -> int | None:
        return self.current_player if self.phase is Phase.FINISHED else None

    # ── commands ──

    def start(self, number_of_players: int) -> CommandResult:
        if not 1 <= number_of_players <= MAX_PLAYERS:
            return CommandResult(
                ok=False,
                message=f"Choose between 1 and {MAX_PLAYERS} players.",
            )

        self._epoch += 1
        self.busy = False
        self.number_of_players = number_of_players
        self.layout = self.generator.generate()
        self.positions = [0] * number_of_players
        self.current_player = 0
        self.last_dice = None
        self.phase = Phase.IN_PROGRESS
        self.message = f"Game started! It's {self._color(0)} player's turn to roll the dice."
        self._emit("started")
        return CommandResult(message=self.message)

    def reset_board(self) -> CommandResult:
        if self.busy:
            return CommandResult(ok=False, message="Wait for the current move to finish.")
        if self.phase is not Phase.IN_PROGRESS:
            return CommandResult(ok=False, message="No game in progress.")

        self.layout = self.generator.generate()
        self.message = (
            f"The game board has been reset! "
            f"It's still {self._color(self.current_player)}'s turn."
        )
        self._emit("board_reset")
        return CommandResult(message=self.message)

    def return_to_menu(self) -> CommandResult:
        self._epoch += 1
        self.busy = False
        self.phase = Phase.NOT_STARTED
        self.positions = [0] * self.number_of_players
        self.current_player = 0
        self.layout = None
        self.last_dice = None
        self.message = WELCOME_MESSAGE
        self._emit("menu")
        return CommandResult(message=self.message)

    def roll_dice(self) -> CommandResult:
        if self.busy:
            return CommandResult(ok=False, message="A move is already in progress.")
        if self.phase is not Phase.IN_PROGRESS or self.layout is None:
            return CommandResult(ok=False, message="No game in progress.")

        epoch = self._epoch
        self.busy = True
        try:
            return self._play_roll(epoch)
        finally:
            if self._epoch == epoch:
                self.busy = False

    # ── internals ──

    def _play_roll(self, epoch: int) -> CommandResult:
        player = self.current_player
        color = self._color(player)

        dice = (self.rng.randint(1, DICE_SIDES), self.rng.randint(1, DICE_SIDES))
        self.last_dice = dice
        move = resolve_move(self.positions[player], dice, self.layout)

        self._emit("dice", player=player, dice=dice,
                   message=f"Player {color} rolled {dice[0]} and {dice[1]}.")
        if self._epoch != epoch:
            return _abandoned(move)

        for square in move.path:
            self.positions[player] = square
            self._emit("step", player=player, square=square)
            if self._epoch != epoch:
                return _abandoned(move)

        if move.redirected:
            summary = (
                f"Player {color} hit a {move.redirect_kind}! "
                f"Moving from {move.landing_square} to {move.final_square}."
            )
            self.positions[player] = move.final_square
            self._emit(move.redirect_kind, player=player,
                       square=move.final_square, message=summary)
            if self._epoch != epoch:
                return _abandoned(move)
        else:
            summary = f"Player {color} moves to square {move.final_square}."

        if move.won:
            self.phase = Phase.FINISHED
            self.message = f"{summary} Congratulations Player {color}, you win!"
            self._emit("win", player=player, square=move.final_square)
        elif move.doubles:
            self.message = f"{summary} Player {color} rolled doubles! Roll again."
            self._emit("extra_turn", player=player)
        else:
            self.current_player = next_player(player, self.number_of_players, dice)
            self.message = f"{summary} It's {self._color(self.current_player)}'s turn."
            self._emit("turn", player=self.current_player)

        return CommandResult(message=self.message, move=move)

    def _emit(self, kind: str, player: int | None = None, **kwargs) -> None:
        if player is None:
            player = self.current_player
        kwargs.setdefault("message", self.message)
        self.observer.on_event(GameEvent(kind=kind, player=player, **kwargs))

    @staticmethod
    def _color(player: int) -> str:
        return PLAYER_COLOR_NAMES[player]


def _abandoned(move: MoveResult) -> CommandResult:
    return CommandResult(ok=False, message="Move abandoned.", move=move)
