"""Procedural placement of snakes and ladders."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Sequence

from snakes_ladders.board import (
    BOARD_SIZE,
    MAX_LADDERS,
    MAX_SNAKES,
    MIN_LADDERS,
    MIN_SNAKES,
    SNAKE_COLOR_PAIRS,
    BoardLayout,
    Ladder,
    Snake,
    row_of,
)
from snakes_ladders.geometry import (
    VIRTUAL_BOARD_WIDTH,
    Segment,
    any_intersect,
    ladder_rails,
    min_head_distance_squared,
    point_to_segment_distance_squared,
    snake_polyline,
    square_to_coordinate,
)

MAX_ATTEMPTS = 50  # per snake/ladder slot
MIN_ROW_SPAN = 2


@dataclass
class _Placement:
    """Everything accepted so far while one layout is being built."""

    used: set[int] = field(default_factory=set)
    ladders: list[Ladder] = field(default_factory=list)
    snakes: list[Snake] = field(default_factory=list)
    rails: list[list[Segment]] = field(default_factory=list)
    bodies: list[list[Segment]] = field(default_factory=list)
    ladder_bases: Counter = field(default_factory=Counter)
    snake_heads: Counter = field(default_factory=Counter)
    snake_tails: Counter = field(default_factory=Counter)


class BoardGenerator:
    """Builds a random, valid :class:`BoardLayout`.

    *rng* only needs ``randint``, ``sample`` and ``choice``: a
    ``random.Random`` by default, or a scripted stand-in in tests.
    Each snake or ladder gets ``max_attempts`` tries; a slot that runs out
    is dropped, so a layout can hold fewer obstacles than were drawn.
    """

    def __init__(
        self,
        rng: Any = None,
        width: float = VIRTUAL_BOARD_WIDTH,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.max_attempts = max_attempts
        self._min_dist_sq = min_head_distance_squared(width)

    def generate(self) -> BoardLayout:
        num_ladders = self.rng.randint(MIN_LADDERS, MAX_LADDERS)
        num_snakes = self.rng.randint(MIN_SNAKES, MAX_SNAKES)
        placed = _Placement()

        # Ladders go first so snakes can be routed around them
        for _ in range(num_ladders):
            for _ in range(self.max_attempts):
                if self._try_ladder(placed):
                    break

        for _ in range(num_snakes):
            for _ in range(self.max_attempts):
                if self._try_snake(placed):
                    break

        return BoardLayout(ladders=tuple(placed.ladders), snakes=tuple(placed.snakes))

    def _pick_pair(self, placed: _Placement) -> tuple[int, int]:
        candidates = [sq for sq in range(2, BOARD_SIZE) if sq not in placed.used]
        a, b = self.rng.sample(candidates, 2)
        return a, b

    def _try_ladder(self, placed: _Placement) -> bool:
        a, b = self._pick_pair(placed)
        start, end = min(a, b), max(a, b)
        start_row = row_of(start)

        if row_of(end) - start_row < MIN_ROW_SPAN:
            return False
        if placed.ladder_bases[start_row] >= 1:
            return False

        rails = ladder_rails(start, end, self.width)
        if any(any_intersect(rails, other) for other in placed.rails):
            return False

        placed.ladders.append(Ladder(start, end))
        placed.rails.append(rails)
        placed.used.update((start, end))
        placed.ladder_bases[start_row] += 1
        return True

    def _try_snake(self, placed: _Placement) -> bool:
        a, b = self._pick_pair(placed)
        head, tail = max(a, b), min(a, b)
        head_row, tail_row = row_of(head), row_of(tail)

        if head_row - tail_row < MIN_ROW_SPAN:
            return False
        if placed.snake_heads[head_row] >= 1:
            return False
        if placed.snake_tails[tail_row] >= 1:
            return False

        head_pos = square_to_coordinate(head, self.width)
        if self._crowded(head_pos, placed.rails) or self._crowded(head_pos, placed.bodies):
            return False

        body = snake_polyline(head, tail, self.width)
        if any(any_intersect(body, other) for other in placed.bodies):
            return False
        # Earlier heads need the same clearance from the new body
        if any(self._crowded(square_to_coordinate(s.head, self.width), [body])
               for s in placed.snakes):
            return False

        colors = self.rng.choice(SNAKE_COLOR_PAIRS)
        placed.snakes.append(Snake(head, tail, tuple(colors)))
        placed.bodies.append(body)
        placed.used.update((head, tail))
        placed.snake_heads[head_row] += 1
        placed.snake_tails[tail_row] += 1
        return True

    def _crowded(self, point, shapes: Sequence[list[Segment]]) -> bool:
        """True if *point* is too close to any segment of any shape."""
        return any(
            point_to_segment_distance_squared(point, seg) < self._min_dist_sq
            for shape in shapes
            for seg in shape
        )


def generate_board(rng: Any = None) -> BoardLayout:
    return BoardGenerator(rng).generate()
