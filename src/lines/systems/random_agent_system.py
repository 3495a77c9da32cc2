from __future__ import annotations

import random
from typing import List, Optional, Tuple

from esper import World

from lines.components.random_agent import RandomAgent
from lines.components.turn_phase import AwaitingSelection
from lines.events.bus import EventBus, EVENT_TICK, EVENT_TILE_CLICK
from lines.systems.path_finder import has_any_move, reachable_cells
from lines.systems.turn_controller import TurnController
from lines.world import get_player_entity

Position = Tuple[int, int]


class RandomAgentSystem:
    """Plays a random legal move whenever a RandomAgent player is on turn."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        controller: TurnController,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.controller = controller
        self.random = rng or self._agent_rng()
        self.moves_played = 0
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _agent(self) -> RandomAgent | None:
        player = get_player_entity(self.world)
        if player is None:
            return None
        return self.world.try_component(player, RandomAgent)

    def _agent_rng(self) -> random.Random:
        agent = self._agent()
        if agent is not None and agent.seed is not None:
            return random.Random(agent.seed)
        return getattr(self.world, "random", None) or random.Random()

    def on_tick(self, sender, **payload) -> None:
        if self._agent() is None:
            return
        if not isinstance(self.controller.phase, AwaitingSelection):
            return
        if not has_any_move(self.controller.board):
            return
        move = self.choose_move()
        if move is None:
            return
        src, dst = move
        self.event_bus.emit(EVENT_TILE_CLICK, row=src[0], col=src[1])
        self.event_bus.emit(EVENT_TILE_CLICK, row=dst[0], col=dst[1])
        self.moves_played += 1

    def choose_move(self) -> Optional[Tuple[Position, Position]]:
        board = self.controller.board
        candidates: List[Tuple[Position, Position]] = []
        for src in board.occupied_positions():
            for dst in sorted(reachable_cells(board, src)):
                candidates.append((src, dst))
        if not candidates:
            return None
        return self.random.choice(candidates)
