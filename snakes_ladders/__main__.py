"""CLI entry point: python -m snakes_ladders {play,board,simulate,chart}."""

from __future__ import annotations

import argparse
import random
import sys
import time

from snakes_ladders.board import MAX_PLAYERS, PLAYER_COLOR_NAMES, BoardLayout
from snakes_ladders.chart import make_rolls_chart
from snakes_ladders.game import GameEvent, GameSession, Phase
from snakes_ladders.generator import generate_board
from snakes_ladders.simulation import simulate, summarize


# ── Terminal presentation ────────────────────────────────────────────

class PrintObserver:
    """Prints game events, pausing *delay* seconds on each token step."""

    def __init__(self, delay: float = 0.0, out=None):
        self.delay = delay
        self.out = out or sys.stdout

    def on_event(self, event: GameEvent) -> None:
        if event.kind == "step":
            print(f"  … {event.square}", file=self.out, flush=True)
            if self.delay:
                time.sleep(self.delay)
        elif event.kind in ("ladder", "snake"):
            print(f"  … {event.kind}! → {event.square}", file=self.out)
        else:
            print(event.message, file=self.out)


def format_layout(layout: BoardLayout) -> str:
    lines = [f"Ladders ({len(layout.ladders)}):"]
    for ladder in sorted(layout.ladders, key=lambda l: l.start):
        lines.append(f"  {ladder.start:3d} → {ladder.end}")
    lines.append(f"Snakes ({len(layout.snakes)}):")
    for snake in sorted(layout.snakes, key=lambda s: s.head):
        lines.append(f"  {snake.head:3d} → {snake.tail}")
    return "\n".join(lines)


def _prompt(text: str) -> str:
    try:
        return input(text).strip().lower()
    except EOFError:
        return "q"


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Interactive game: Enter rolls, r resets the board, m returns to menu."""
    rng = random.Random(args.seed)
    session = GameSession(rng=rng, observer=PrintObserver(delay=args.delay))

    result = session.start(args.players)
    if not result.ok:
        print(result.message, file=sys.stderr)
        sys.exit(1)
    print(format_layout(session.layout))

    while True:
        if session.phase is Phase.FINISHED:
            if _prompt("Play again? [y/N] ") != "y":
                return
            session.start(session.number_of_players)
            print(format_layout(session.layout))
            continue

        if session.phase is Phase.NOT_STARTED:
            answer = _prompt(f"Number of players (1–{MAX_PLAYERS}), or q to quit: ")
            if answer == "q":
                return
            result = session.start(int(answer) if answer.isdigit() else 0)
            if not result.ok:
                print(result.message, file=sys.stderr)
                continue
            print(format_layout(session.layout))
            continue

        color = PLAYER_COLOR_NAMES[session.current_player]
        where = " ".join(
            f"{PLAYER_COLOR_NAMES[i]}={pos}" for i, pos in enumerate(session.positions)
        )
        answer = _prompt(f"[{where}] {color} — Enter to roll, r/m/q: ")
        if answer == "q":
            return
        if answer == "r":
            if session.reset_board().ok:
                print(format_layout(session.layout))
        elif answer == "m":
            session.return_to_menu()
        else:
            session.roll_dice()


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    """Generate and print one layout."""
    print(format_layout(generate_board(random.Random(args.seed))))


# ── simulate ─────────────────────────────────────────────────────────

def _check_batch_args(args: argparse.Namespace) -> None:
    if not 1 <= args.players <= MAX_PLAYERS:
        print(f"Choose between 1 and {MAX_PLAYERS} players.", file=sys.stderr)
        sys.exit(1)
    if args.games < 1:
        print("Play at least one game.", file=sys.stderr)
        sys.exit(1)


def cmd_simulate(args: argparse.Namespace) -> None:
    """Auto-play a batch of games and print summary statistics."""
    _check_batch_args(args)
    stats = summarize(simulate(args.games, players=args.players, seed=args.seed))

    print("\nSimulation")
    print("=" * 40)
    print(f"  {'games':24s} {stats.games:7d}")
    print(f"  {'finished':24s} {stats.finished:7d}")
    print(f"  {'mean rolls':24s} {stats.mean_rolls:7.1f}")
    print(f"  {'fewest / most rolls':24s} {stats.min_rolls:3d} / {stats.max_rolls}")
    print(f"  {'mean ladders placed':24s} {stats.mean_ladders_placed:7.2f}")
    print(f"  {'mean snakes placed':24s} {stats.mean_snakes_placed:7.2f}")
    print(f"  {'mean ladders climbed':24s} {stats.mean_ladders_climbed:7.2f}")
    print(f"  {'mean snakes hit':24s} {stats.mean_snakes_hit:7.2f}")
    for player, wins in sorted(stats.wins_by_player.items()):
        print(f"  {PLAYER_COLOR_NAMES[player] + ' wins':24s} {wins:7d}")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Simulate a batch of games and chart how long they took."""
    _check_batch_args(args)
    summaries = simulate(args.games, players=args.players, seed=args.seed)
    if not any(s.reason == "win" for s in summaries):
        print("No game finished; nothing to chart.", file=sys.stderr)
        sys.exit(1)

    out = args.output or "game_lengths.png"
    make_rolls_chart(summaries, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders with a fresh board every round",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument("--players", type=int, default=2, help=f"1–{MAX_PLAYERS} players (default 2)")
    p_play.add_argument("--seed", type=int, help="Seed for boards and dice")
    p_play.add_argument("--delay", type=float, default=0.2, help="Seconds per token step")

    p_board = sub.add_parser("board", help="Print a generated board")
    p_board.add_argument("--seed", type=int, help="Seed for the generator")

    for name, help_text in (("simulate", "Auto-play games and print stats"),
                            ("chart", "Chart game lengths from auto-played games")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--games", type=int, default=500, help="Games to play (default 500)")
        p.add_argument("--players", type=int, default=2, help="Players per game")
        p.add_argument("--seed", type=int, help="Seed for boards and dice")
        if name == "chart":
            p.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args()
    if args.command == "play":
        cmd_play(args)
    elif args.command == "board":
        cmd_board(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "chart":
        cmd_chart(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
