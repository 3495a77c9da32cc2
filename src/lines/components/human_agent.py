from dataclasses import dataclass


@dataclass(slots=True)
class HumanAgent:
    """Marker component for the player entity driven by real input."""
