from dataclasses import dataclass


@dataclass(slots=True)
class RandomAgent:
    """Marker component for a player entity that plays random legal moves."""

    seed: int | None = None
