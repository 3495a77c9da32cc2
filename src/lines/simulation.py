from __future__ import annotations

import random
from dataclasses import dataclass

from lines.components.game_rules import GameRules
from lines.events.bus import EventBus, EVENT_MATCH_CLEARED, EVENT_TICK
from lines.systems.headless_animation_system import HeadlessAnimationSystem
from lines.systems.random_agent_system import RandomAgentSystem
from lines.systems.turn_controller import TurnController
from lines.world import create_world


@dataclass(slots=True)
class GameResult:
    """Outcome of one headless game."""

    score: int
    moves: int
    clears: int
    finished: bool


def play_random_game(
    seed: int | None = None,
    *,
    rules: GameRules | None = None,
    max_ticks: int = 10_000,
    dt: float = 1 / 60,
) -> GameResult:
    """Run a full game with a random agent and instant animations.

    Stops at game over or after max_ticks ticks, whichever comes first.
    """
    bus = EventBus()
    world = create_world(rules=rules, autoplay=True, rng=random.Random(seed))
    HeadlessAnimationSystem(bus)
    controller = TurnController(world, bus)
    agent = RandomAgentSystem(world, bus, controller)
    clears = []
    bus.subscribe(EVENT_MATCH_CLEARED, lambda sender, **payload: clears.append(payload['positions']))
    for _ in range(max_ticks):
        if controller.is_game_over:
            break
        bus.emit(EVENT_TICK, dt=dt)
    return GameResult(
        score=controller.score,
        moves=agent.moves_played,
        clears=len(clears),
        finished=controller.is_game_over,
    )
