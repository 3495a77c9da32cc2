from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from lines.components.board import Board

Position = Tuple[int, int]

# Up, down, left, right. The order fixes which of several shortest paths wins.
NEIGHBOR_STEPS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _neighbors(board: Board, pos: Position):
    row, col = pos
    for d_row, d_col in NEIGHBOR_STEPS:
        candidate = (row + d_row, col + d_col)
        if board.in_bounds(candidate):
            yield candidate


def _search(
    board: Board, src: Position, goal: Position | None = None
) -> Dict[Position, Optional[Position]]:
    """Breadth-first flood from src over empty cells, recording parents.

    Stops as soon as goal is discovered when one is given.
    """
    parents: Dict[Position, Optional[Position]] = {src: None}
    queue = deque([src])
    while queue:
        current = queue.popleft()
        for nxt in _neighbors(board, current):
            if nxt in parents or not board.is_empty(nxt):
                continue
            parents[nxt] = current
            if nxt == goal:
                return parents
            queue.append(nxt)
    return parents


def find_path(board: Board, src: Position, dst: Position) -> Optional[List[Position]]:
    """Return the shortest path from src to dst, or None if dst is unreachable.

    Every cell on the path except src must be empty; src is traversable
    whatever it holds because the moving circle vacates it. The path is listed
    from dst back to src inclusive.
    """
    if not board.in_bounds(src) or not board.in_bounds(dst):
        return None
    if src == dst or not board.is_empty(dst):
        return None
    parents = _search(board, src, goal=dst)
    if dst not in parents:
        return None
    path: List[Position] = []
    step: Optional[Position] = dst
    while step is not None:
        path.append(step)
        step = parents[step]
    return path


def reachable_cells(board: Board, src: Position) -> Set[Position]:
    """All empty cells a circle at src could move to."""
    if not board.in_bounds(src):
        return set()
    reached = set(_search(board, src))
    reached.discard(src)
    return reached


def has_any_move(board: Board) -> bool:
    """True when some circle has at least one empty neighbour to move into."""
    for pos in board.occupied_positions():
        for nxt in _neighbors(board, pos):
            if board.is_empty(nxt):
                return True
    return False
