"""Play many games without a front end and summarise how they went."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from snakes_ladders.game import GameSession, ListObserver, Phase

MAX_ROLLS = 1000  # safety valve; a game this long is treated as unfinished


@dataclass
class GameSummary:
    """Outcome of a single simulated game."""

    winner: int | None  # player index, or None if the game didn't finish
    reason: str  # "win" | "max_rolls"
    rolls: int = 0
    ladders_climbed: int = 0
    snakes_hit: int = 0
    ladders_placed: int = 0
    snakes_placed: int = 0


@dataclass
class SimulationStats:
    games: int
    finished: int
    mean_rolls: float
    min_rolls: int
    max_rolls: int
    wins_by_player: dict[int, int] = field(default_factory=dict)
    mean_ladders_placed: float = 0.0
    mean_snakes_placed: float = 0.0
    mean_ladders_climbed: float = 0.0
    mean_snakes_hit: float = 0.0


def simulate_game(
    players: int = 2,
    rng: random.Random | None = None,
    max_rolls: int = MAX_ROLLS,
) -> GameSummary:
    observer = ListObserver()
    session = GameSession(rng=rng, observer=observer)
    started = session.start(players)
    if not started.ok:
        raise ValueError(started.message)

    layout = session.layout
    rolls = 0
    while session.phase is Phase.IN_PROGRESS and rolls < max_rolls:
        session.roll_dice()
        rolls += 1

    kinds = observer.kinds()
    finished = session.phase is Phase.FINISHED
    return GameSummary(
        winner=session.winner,
        reason="win" if finished else "max_rolls",
        rolls=rolls,
        ladders_climbed=kinds.count("ladder"),
        snakes_hit=kinds.count("snake"),
        ladders_placed=len(layout.ladders),
        snakes_placed=len(layout.snakes),
    )


def simulate(games: int, players: int = 2, seed: int | None = None) -> list[GameSummary]:
    """Run *games* independent games from one seeded random source."""
    rng = random.Random(seed)
    return [simulate_game(players, rng) for _ in range(games)]


def summarize(summaries: list[GameSummary]) -> SimulationStats:
    if not summaries:
        raise ValueError("Nothing to summarize.")

    done = [s for s in summaries if s.reason == "win"]
    rolls = [s.rolls for s in done] or [0]
    wins: dict[int, int] = {}
    for s in done:
        wins[s.winner] = wins.get(s.winner, 0) + 1

    n = len(summaries)
    return SimulationStats(
        games=n,
        finished=len(done),
        mean_rolls=sum(rolls) / len(rolls),
        min_rolls=min(rolls),
        max_rolls=max(rolls),
        wins_by_player=wins,
        mean_ladders_placed=sum(s.ladders_placed for s in summaries) / n,
        mean_snakes_placed=sum(s.snakes_placed for s in summaries) / n,
        mean_ladders_climbed=sum(s.ladders_climbed for s in summaries) / n,
        mean_snakes_hit=sum(s.snakes_hit for s in summaries) / n,
    )
