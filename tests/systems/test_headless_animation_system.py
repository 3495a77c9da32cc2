from lines.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_TICK,
)
from lines.systems.headless_animation_system import HeadlessAnimationSystem


def test_animation_completes_on_next_tick():
    bus = EventBus()
    system = HeadlessAnimationSystem(bus)
    completed = []
    bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **payload: completed.append(payload))

    bus.emit(EVENT_ANIMATION_START, kind='move', items=[(0, 1), (0, 0)])
    assert completed == []
    bus.emit(EVENT_TICK, dt=0.02)

    assert completed == [{'kind': 'move', 'items': [(0, 1), (0, 0)]}]
    assert system.pending == []


def test_animation_started_during_completion_waits_a_tick():
    bus = EventBus()
    HeadlessAnimationSystem(bus)
    completed = []

    def on_complete(sender, **payload):
        completed.append(payload['kind'])
        if payload['kind'] == 'move':
            bus.emit(EVENT_ANIMATION_START, kind='disappear', items=[])

    bus.subscribe(EVENT_ANIMATION_COMPLETE, on_complete)
    bus.emit(EVENT_ANIMATION_START, kind='move', items=[])
    bus.emit(EVENT_TICK, dt=0.02)
    assert completed == ['move']
    bus.emit(EVENT_TICK, dt=0.02)
    assert completed == ['move', 'disappear']


def test_start_without_kind_is_ignored():
    bus = EventBus()
    system = HeadlessAnimationSystem(bus)
    bus.emit(EVENT_ANIMATION_START, items=[])
    assert system.pending == []


def test_board_reset_drops_pending_animations():
    bus = EventBus()
    system = HeadlessAnimationSystem(bus)
    completed = []
    bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **payload: completed.append(payload))

    bus.emit(EVENT_ANIMATION_START, kind='move', items=[(0, 1), (0, 0)])
    bus.emit(EVENT_BOARD_CHANGED, reason='move', snapshot=())
    assert len(system.pending) == 1

    bus.emit(EVENT_BOARD_CHANGED, reason='reset', snapshot=())
    bus.emit(EVENT_TICK, dt=0.02)

    assert system.pending == []
    assert completed == []
