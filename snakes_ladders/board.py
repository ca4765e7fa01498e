"""Board constants and the immutable layout of snakes and ladders."""

from __future__ import annotations

from dataclasses import dataclass, field

BOARD_SIZE = 100
ROW_LENGTH = 10
DICE_SIDES = 6

MIN_LADDERS, MAX_LADDERS = 5, 8
MIN_SNAKES, MAX_SNAKES = 5, 8

MAX_PLAYERS = 4
PLAYER_COLOR_NAMES = ["Blue", "Red", "Green", "Yellow"]

# fmt: off
SNAKE_COLOR_PAIRS: list[tuple[str, str]] = [
    ("#EF4444", "#F87171"),  # red
    ("#3B82F6", "#60A5FA"),  # blue
    ("#22C55E", "#4ADE80"),  # green
    ("#A855F7", "#C084FC"),  # purple
    ("#F97316", "#FB923C"),  # orange
    ("#EAB308", "#FACC15"),  # yellow
    ("#EC4899", "#F472B6"),  # pink
    ("#14B8A6", "#2DD4BF"),  # teal
]
# fmt: on


def _check_square(square: int) -> None:
    if not 1 <= square <= BOARD_SIZE:
        raise ValueError(f"Square {square} is off the board.")


def row_of(square: int) -> int:
    """Logical row of *square*, 0 for 1–10 up to 9 for 91–100."""
    _check_square(square)
    return (square - 1) // ROW_LENGTH


def column_of(square: int) -> int:
    """Column of *square* in zig-zag order (odd rows run right-to-left)."""
    _check_square(square)
    col = (square - 1) % ROW_LENGTH
    if row_of(square) % 2:
        col = ROW_LENGTH - 1 - col
    return col


@dataclass(frozen=True)
class Ladder:
    start: int
    end: int

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Ladder must climb: {self.start} → {self.end}")


@dataclass(frozen=True)
class Snake:
    head: int
    tail: int
    colors: tuple[str, str] = SNAKE_COLOR_PAIRS[0]

    def __post_init__(self):
        if self.tail >= self.head:
            raise ValueError(f"Snake must descend: {self.head} → {self.tail}")


@dataclass(frozen=True)
class BoardLayout:
    """Snakes and ladders for one round.

    ``destinations`` maps every ladder start and snake head to where the
    token ends up. It is derived once at construction.
    """

    ladders: tuple[Ladder, ...] = ()
    snakes: tuple[Snake, ...] = ()
    destinations: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "ladders", tuple(self.ladders))
        object.__setattr__(self, "snakes", tuple(self.snakes))

        combined: dict[int, int] = {}
        pairs = [(l.start, l.end) for l in self.ladders]
        pairs += [(s.head, s.tail) for s in self.snakes]
        for square, dest in pairs:
            if square in combined:
                raise ValueError(f"Square {square} already launches a snake or ladder.")
            combined[square] = dest
        object.__setattr__(self, "destinations", combined)

    @classmethod
    def empty(cls) -> BoardLayout:
        return cls()

    def destination(self, square: int) -> int | None:
        return self.destinations.get(square)

    def is_ladder(self, square: int) -> bool:
        dest = self.destinations.get(square)
        return dest is not None and dest > square

    def is_snake(self, square: int) -> bool:
        dest = self.destinations.get(square)
        return dest is not None and dest < square
