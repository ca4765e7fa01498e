"""Generate a histogram of how many rolls simulated games took."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from snakes_ladders.simulation import GameSummary


def make_rolls_chart(
    summaries: list[GameSummary],
    output_path: str = "game_lengths.png",
    title: str = "Snakes & Ladders — rolls per game",
) -> str:
    """Create a histogram of rolls-to-finish for every finished game.

    Returns the path to the saved PNG.
    """
    rolls = [s.rolls for s in summaries if s.reason == "win"]
    if not rolls:
        raise ValueError("No finished games to chart.")

    fig, ax = plt.subplots(figsize=(10, 5))
    bins = range(min(rolls), max(rolls) + 2)
    ax.hist(rolls, bins=bins, color="#4A90D9", edgecolor="white")

    mean = sum(rolls) / len(rolls)
    ax.axvline(mean, color="#EF4444", linestyle="--", linewidth=1.5)
    ax.text(
        mean, ax.get_ylim()[1] * 0.95, f" mean {mean:.1f}",
        color="#EF4444", va="top", fontsize=11, fontweight="bold",
    )

    ax.set_xlabel("Rolls until someone reached 100")
    ax.set_ylabel("Games")
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
