from typing import Any, List, Tuple

from lines.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_TICK,
)


class HeadlessAnimationSystem:
    """Stands in for a renderer: every started animation completes on the next tick."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.pending: List[Tuple[str, Any]] = []
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind')
        if kind is None:
            return
        self.pending.append((kind, kwargs.get('items', [])))

    def on_board_changed(self, sender, **kwargs):
        # A reset board has nothing left to animate.
        if kwargs.get('reason') == 'reset':
            self.pending = []

    def on_tick(self, sender, **kwargs):
        if not self.pending:
            return
        # Completions may start new animations; those wait for the next tick.
        finished, self.pending = self.pending, []
        for kind, items in finished:
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, items=items)
