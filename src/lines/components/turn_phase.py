"""Turn phases of the controller state machine.

Exactly one phase is current at a time; presentation code observes changes
through ``EVENT_PHASE_CHANGED`` instead of inspecting marker components.
"""
from dataclasses import dataclass
from typing import Tuple, Union

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class AwaitingSelection:
    pass


@dataclass(frozen=True, slots=True)
class Selected:
    position: Position


@dataclass(frozen=True, slots=True)
class Moving:
    # Destination first, source last; consumers pop from the tail.
    path: Tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class Resolving:
    pass


@dataclass(frozen=True, slots=True)
class Refilling:
    pass


@dataclass(frozen=True, slots=True)
class GameOver:
    score: int


TurnPhase = Union[AwaitingSelection, Selected, Moving, Resolving, Refilling, GameOver]
