from dataclasses import dataclass

from lines.constants import (
    CIRCLE_KINDS,
    CIRCLES_PER_TURN,
    FIELD_SIZE,
    RUN_LENGTH,
    SCORE_PER_CELL,
)


@dataclass(slots=True)
class GameRules:
    """Singleton component with the tunable rules of a session.

    Score formula: ``score += len(cleared) * score_per_cell``.
    """

    size: int = FIELD_SIZE
    colors: int = CIRCLE_KINDS
    circles_per_turn: int = CIRCLES_PER_TURN
    run_length: int = RUN_LENGTH
    score_per_cell: int = SCORE_PER_CELL

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if self.colors < 1:
            raise ValueError(f"Need at least one circle color, got {self.colors}")
        if self.circles_per_turn < 1:
            raise ValueError(f"Circles per turn must be positive, got {self.circles_per_turn}")
        if self.run_length < 2:
            raise ValueError(f"Run length must be at least 2, got {self.run_length}")
        if self.score_per_cell < 0:
            raise ValueError(f"Score per cell cannot be negative, got {self.score_per_cell}")
