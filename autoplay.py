"""Headless random-policy runner for the tile-merge engine.

Plays a batch of seeded games with a uniformly random move every turn and
prints per-game results plus a summary. With ``--plot`` it also draws a
histogram of final scores and the mean score progression per turn.

Run with: ``python autoplay.py --games 200 --seed 7 --plot``
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import List, Optional

# Ensure src/ is on the import path so we can import the engine.
SRC_PATH = Path(__file__).parent / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from tilemerge.ai.simulation import GameRecord, mean_score_by_turn, play_random_games  # type: ignore
from tilemerge.constants import BOARD_SIZE  # type: ignore


def summarize(records: List[GameRecord]) -> str:
    scores = [record.final_score for record in records]
    best_tile = max((record.max_tile for record in records), default=0)
    mean = sum(scores) / len(scores) if scores else 0.0
    return (
        f"games={len(records)} mean_score={mean:.1f} "
        f"max_score={max(scores, default=0)} best_tile={best_tile}"
    )


def plot_scores(records: List[GameRecord], output: Optional[Path]) -> None:
    import matplotlib.pyplot as plt
    import numpy as np

    scores = np.array([record.final_score for record in records])
    progression = np.array(mean_score_by_turn(records))
    fig, (hist_ax, turn_ax) = plt.subplots(1, 2, figsize=(12, 4))

    hist_ax.hist(scores, bins=min(30, max(1, len(scores))), color="#8f7a66", edgecolor="black")
    hist_ax.axvline(scores.mean(), color="gray", linestyle="--", label=f"Mean ({scores.mean():.0f})")
    hist_ax.set_xlabel("Final score")
    hist_ax.set_ylabel("Games")
    hist_ax.set_title("Random-policy final scores")
    hist_ax.legend()
    hist_ax.grid(True, alpha=0.3)

    turn_ax.plot(np.arange(1, len(progression) + 1), progression, color="#8f7a66")
    turn_ax.set_xlabel("Turn")
    turn_ax.set_ylabel("Mean score")
    turn_ax.set_title("Score progression")
    turn_ax.grid(True, alpha=0.3)
    fig.tight_layout()
    if output is not None:
        plt.savefig(output, dpi=150, bbox_inches="tight")
        print(f"Saved plot to {output}")
    else:
        plt.show()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--size", type=int, default=BOARD_SIZE)
    parser.add_argument("--plot", action="store_true", help="Plot final scores and mean score per turn")
    parser.add_argument("--output", type=Path, default=None, help="Save the plot instead of showing it")
    args = parser.parse_args(argv)

    records = play_random_games(args.games, seed=args.seed, size=args.size)
    for index, record in enumerate(records):
        print(
            f"game {index}: score={record.final_score} max_tile={record.max_tile} "
            f"turns={record.turns} over={record.game_over}"
        )
    print(summarize(records))
    if args.plot and records:
        plot_scores(records, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
