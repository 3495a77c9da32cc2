from __future__ import annotations

from typing import Dict, List, Set, Tuple

from lines.components.board import Board, EMPTY
from lines.constants import RUN_LENGTH

Position = Tuple[int, int]

# One half of each axis: up, left, down-right, up-right. The opposite halves
# would only rediscover the same windows from their other end.
RUN_DIRECTIONS: Tuple[Position, ...] = ((-1, 0), (0, -1), (1, 1), (-1, 1))


def _window(board: Board, start: Position, step: Position, length: int) -> List[Position] | None:
    row, col = start
    d_row, d_col = step
    cells = [(row + d_row * i, col + d_col * i) for i in range(length)]
    if not board.in_bounds(cells[-1]):
        return None
    return cells


def find_runs(board: Board, run_length: int = RUN_LENGTH) -> Set[Position]:
    """Positions covered by any straight same-color window of run_length cells.

    Longer runs are covered completely because consecutive windows overlap.
    The board is not modified.
    """
    matched: Set[Position] = set()
    for start in board.positions():
        color = board.get(start)
        if color is EMPTY:
            continue
        for step in RUN_DIRECTIONS:
            cells = _window(board, start, step, run_length)
            if cells is None:
                continue
            if all(board.get(pos) == color for pos in cells[1:]):
                matched.update(cells)
    return matched


def resolve_with_colors(board: Board, run_length: int = RUN_LENGTH) -> Dict[Position, int]:
    """Clear every run and return the cleared cells with the color each held.

    The whole board is scanned before anything is cleared.
    """
    cleared = {pos: board.get(pos) for pos in find_runs(board, run_length)}
    for pos in cleared:
        board.clear(pos)
    return cleared


def resolve(board: Board, run_length: int = RUN_LENGTH) -> Set[Position]:
    return set(resolve_with_colors(board, run_length))
