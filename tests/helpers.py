from __future__ import annotations

import random
from typing import Sequence

from lines.components.board import Board
from lines.components.game_rules import GameRules
from lines.events.bus import EventBus
from lines.systems.turn_controller import TurnController
from lines.world import create_world


def board_from_layout(layout: Sequence[str]) -> Board:
    """Build a board from rows of characters: '.' is empty, digits are colors."""

    rows = []
    for line in layout:
        rows.append([None if ch == '.' else int(ch) for ch in line])
    return Board.from_rows(rows)


def make_controller(
    board: Board | None = None,
    *,
    rules: GameRules | None = None,
    seed: int = 0,
    start: bool = False,
) -> tuple[EventBus, TurnController]:
    """Controller over a prepared board; by default skips the opening refills."""

    bus = EventBus()
    if rules is None:
        rules = GameRules(size=board.size) if board is not None else GameRules()
    world = create_world(rules=rules, rng=random.Random(seed))
    controller = TurnController(world, bus, board=board, start=start)
    return bus, controller
