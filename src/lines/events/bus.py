from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_TILE_DESELECT_REQUEST = "tile_deselect_request"  # payload: reason=str
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None


# ============================================================================
# SELECTION & MOVES
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col
EVENT_MOVE_INVALID = "move_invalid"                # payload: src=(r,c), dst=(r,c)
EVENT_MOVE_COMMITTED = "move_committed"            # payload: src=(r,c), dst=(r,c), path=[(r,c),...] dst first


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),...], colors={(r,c): int}
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_circles=[PreviewCircle], skipped=[PreviewCircle]
EVENT_PREVIEW_CHANGED = "preview_changed"          # payload: preview=[PreviewCircle]
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, snapshot=tuple[tuple[int|None,...],...]


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind='move'|'disappear', items=list
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind='move'|'disappear', items=list


# ============================================================================
# GAME FLOW & SCORE
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous=TurnPhase|None, current=TurnPhase
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_GAME_STARTED = "game_started"                # payload: preview=[PreviewCircle]
EVENT_GAME_OVER = "game_over"                      # payload: score=int
