from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class PreviewCircle:
    """A circle announced one turn ahead of landing on the board."""

    position: Tuple[int, int]
    color: int


PreviewBatch = List[PreviewCircle]
