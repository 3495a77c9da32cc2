import random

import pytest

from lines.components.board import Board
from lines.components.preview import PreviewCircle
from lines.systems.spawner import InsufficientFreeCells, commit, generate


def _fill_except(board: Board, free: set) -> None:
    for row, col in board.positions():
        if (row, col) not in free:
            board.set((row, col), (3 * row + col) % 7)


def test_generate_picks_distinct_free_cells_and_valid_colors():
    board = Board()
    board.set((0, 0), 1)
    batch = generate(board, 3, rng=random.Random(1))
    positions = [circle.position for circle in batch]
    assert len(batch) == 3
    assert len(set(positions)) == 3
    assert (0, 0) not in positions
    assert all(0 <= circle.color < 7 for circle in batch)


def test_generate_never_returns_occupied_cells():
    rng = random.Random(11)
    for _ in range(50):
        board = Board()
        for pos in board.positions():
            if rng.random() < 0.7:
                board.set(pos, rng.randrange(7))
        free = set(board.free_positions())
        count = min(3, len(free))
        batch = generate(board, count, rng=rng)
        positions = [circle.position for circle in batch]
        assert len(set(positions)) == count
        assert set(positions) <= free


def test_generate_uses_every_free_cell_when_count_matches():
    board = Board()
    free = {(0, 1), (4, 4), (8, 8)}
    _fill_except(board, free)
    batch = generate(board, 3, rng=random.Random(0))
    assert {circle.position for circle in batch} == free


def test_generate_does_not_mutate_board():
    board = Board(size=4)
    before = board.snapshot()
    generate(board, 3, rng=random.Random(2))
    assert board.snapshot() == before


def test_insufficient_free_cells_fails_without_mutation():
    board = Board()
    _fill_except(board, {(2, 2), (6, 7)})
    before = board.snapshot()
    with pytest.raises(InsufficientFreeCells) as excinfo:
        generate(board, 3, rng=random.Random(0))
    assert excinfo.value.requested == 3
    assert excinfo.value.available == 2
    assert board.snapshot() == before


def test_same_seed_same_batch():
    board = Board()
    first = generate(board, 3, rng=random.Random(42))
    second = generate(board, 3, rng=random.Random(42))
    assert first == second


def test_color_range_follows_configuration():
    board = Board()
    batch = generate(board, 40, rng=random.Random(5), colors=2)
    assert {circle.color for circle in batch} <= {0, 1}


def test_commit_skips_cells_that_filled_up():
    board = Board(size=3)
    board.set((0, 0), 4)
    batch = [PreviewCircle((0, 0), 1), PreviewCircle((1, 1), 2)]
    committed, skipped = commit(board, batch)
    assert committed == [PreviewCircle((1, 1), 2)]
    assert skipped == [PreviewCircle((0, 0), 1)]
    assert board.get((0, 0)) == 4
    assert board.get((1, 1)) == 2
