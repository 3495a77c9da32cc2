from __future__ import annotations

import logging
import random
from typing import Iterable, List, Tuple

from lines.components.board import Board
from lines.components.preview import PreviewBatch, PreviewCircle
from lines.constants import CIRCLE_KINDS

logger = logging.getLogger(__name__)


class InsufficientFreeCells(RuntimeError):
    """Raised when a refill batch needs more free cells than the board has."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"Need {requested} free cells for refill, only {available} available")
        self.requested = requested
        self.available = available


def _draw_indices(rng: random.Random, population: int, count: int) -> List[int]:
    """Pick count distinct indices from range(population) with a partial shuffle."""
    indices = list(range(population))
    for i in range(count):
        j = rng.randrange(i, population)
        indices[i], indices[j] = indices[j], indices[i]
    return indices[:count]


def generate(
    board: Board,
    count: int,
    *,
    rng: random.Random | None = None,
    colors: int = CIRCLE_KINDS,
) -> PreviewBatch:
    """Choose count distinct free cells and a random color for each.

    The board is only read; committing the batch is left to the caller.
    """
    rng = rng or random.Random()
    free_count = board.count_free()
    if count > free_count:
        raise InsufficientFreeCells(count, free_count)
    batch = [
        PreviewCircle(position=board.nth_free(index), color=rng.randrange(colors))
        for index in _draw_indices(rng, free_count, count)
    ]
    logger.debug("Generated preview batch %s", batch)
    return batch


def commit(board: Board, batch: Iterable[PreviewCircle]) -> Tuple[PreviewBatch, PreviewBatch]:
    """Write a batch onto the board, skipping cells that are no longer empty.

    Returns the circles that landed and the ones that were skipped.
    """
    committed: PreviewBatch = []
    skipped: PreviewBatch = []
    for circle in batch:
        if board.is_empty(circle.position):
            board.set(circle.position, circle.color)
            committed.append(circle)
        else:
            skipped.append(circle)
    if skipped:
        logger.debug("Skipped preview circles on occupied cells: %s", skipped)
    return committed, skipped
