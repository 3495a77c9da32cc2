"""Headless score explorer.

Plays a batch of seeded games with the random agent and plots how final
scores are distributed, which is a quick way to see how rule tweaks (board
size, colors, circles per turn) change the game's difficulty.

Run with: ``python autoplay_tool.py [games] [colors]``
"""
from __future__ import annotations

from pathlib import Path
import sys

import matplotlib.pyplot as plt
import numpy as np

# Ensure src/ is on the import path when run from a checkout.
SRC_PATH = Path(__file__).parent / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from lines.components.game_rules import GameRules  # type: ignore
from lines.simulation import play_random_game  # type: ignore

DEFAULT_GAMES = 50
DEFAULT_COLORS = 7


def main() -> None:
    games = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_GAMES
    colors = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_COLORS
    rules = GameRules(colors=colors)

    results = [play_random_game(seed, rules=rules) for seed in range(games)]
    scores = np.array([result.score for result in results])
    moves = np.array([result.moves for result in results])
    print(f"{games} games, {colors} colors")
    print(f"score: mean={scores.mean():.1f} median={np.median(scores):.0f} max={scores.max()}")
    print(f"moves: mean={moves.mean():.1f} max={moves.max()}")

    plt.figure(figsize=(7, 4))
    plt.hist(scores, bins=max(5, min(30, len(set(scores.tolist())))), edgecolor="black")
    plt.axvline(scores.mean(), color="gray", linestyle="--", label=f"Mean ({scores.mean():.1f})")
    plt.xlabel("Final score")
    plt.ylabel("Games")
    plt.title(f"Random agent scores over {games} games")
    plt.legend()
    plt.grid(True)
    plt.show()


if __name__ == "__main__":
    main()
