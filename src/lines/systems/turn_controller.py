from __future__ import annotations

import logging
from typing import Tuple

from esper import World

from lines.components.board import Board, BoardSnapshot
from lines.components.preview import PreviewBatch
from lines.components.turn_phase import (
    AwaitingSelection,
    GameOver,
    Moving,
    Refilling,
    Resolving,
    Selected,
    TurnPhase,
)
from lines.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_MATCH_CLEARED,
    EVENT_MOVE_COMMITTED,
    EVENT_MOVE_INVALID,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PHASE_CHANGED,
    EVENT_PREVIEW_CHANGED,
    EVENT_REFILL_COMPLETED,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECT_REQUEST,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
)
from lines.systems import spawner
from lines.systems.match_detector import resolve_with_colors
from lines.systems.path_finder import find_path
from lines.world import get_rules

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class TurnController:
    """Sequences select -> move -> resolve -> refill for one board.

    Flow:
      - Clicks select a circle or, once one is selected, try to move it.
        A legal move is written to the board immediately; the phase becomes
        Moving until the presentation reports the move animation finished.
      - Move completion runs one match resolution pass, then commits the
        pending preview batch and draws the next one.
      - Circles that land during a refill are not checked for runs; only
        player moves trigger resolution.
      - Running out of room for the next batch ends the game.
    """

    def __init__(self, world: World, event_bus: EventBus, *, board: Board | None = None, start: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.rules = get_rules(world)
        self.random = getattr(world, "random")
        self.board = board if board is not None else Board(size=self.rules.size)
        self.phase: TurnPhase = AwaitingSelection()
        self.score = 0
        self.preview: PreviewBatch = []
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)
        self.event_bus.subscribe(EVENT_TILE_DESELECT_REQUEST, self.on_deselect_request)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        if start:
            self.start()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.select_or_move((row, col))

    def on_animation_complete(self, sender, **kwargs):
        self.animation_complete(kwargs.get('kind'), kwargs.get('items'))

    def on_deselect_request(self, sender, **kwargs):
        self.deselect(reason=kwargs.get('reason', 'request'))

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Land the first batch, then land its follow-up so one batch is visible and one previewed."""
        if not self._refill(reason='init'):
            return
        if not self._refill(reason='init'):
            return
        logger.info("Game started with %d circles on board", len(self.board.occupied_positions()))
        self.event_bus.emit(EVENT_GAME_STARTED, preview=list(self.preview))

    def new_game(self) -> None:
        self.board.reset()
        self.preview = []
        if self.score:
            delta = -self.score
            self.score = 0
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=self.score, delta=delta)
        self._set_phase(AwaitingSelection())
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='reset', snapshot=self.board.snapshot())
        self.start()

    def select_or_move(self, pos: Position) -> None:
        if not isinstance(self.phase, (AwaitingSelection, Selected)):
            return
        if not self.board.in_bounds(pos):
            return
        if not self.board.is_empty(pos):
            if self.phase == Selected(pos):
                return
            self._set_phase(Selected(pos))
            self.event_bus.emit(EVENT_TILE_SELECTED, row=pos[0], col=pos[1])
            return
        if isinstance(self.phase, Selected):
            self._try_move(self.phase.position, pos)

    def deselect(self, reason: str = 'request') -> None:
        if not isinstance(self.phase, Selected):
            return
        prev = self.phase.position
        self._set_phase(AwaitingSelection())
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])

    def animation_complete(self, kind: str | None, items=None) -> None:
        # Disappear animations are informational; only a finished move advances the turn.
        if kind != 'move' or not isinstance(self.phase, Moving):
            return
        # A completion for some other path belongs to a move from before a new game.
        if items is not None and tuple(items) != self.phase.path:
            logger.debug("Ignoring move completion for stale path %s", items)
            return
        self._resolve()
        self._refill(reason='turn')

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------
    def board_snapshot(self) -> BoardSnapshot:
        return self.board.snapshot()

    @property
    def is_game_over(self) -> bool:
        return isinstance(self.phase, GameOver)

    # ------------------------------------------------------------------
    # Turn steps
    # ------------------------------------------------------------------
    def _try_move(self, src: Position, dst: Position) -> None:
        path = find_path(self.board, src, dst)
        if path is None:
            self.event_bus.emit(EVENT_MOVE_INVALID, src=src, dst=dst)
            return
        color = self.board.get(src)
        self.board.clear(src)
        self.board.set(dst, color)
        logger.debug("Moved color %s from %s to %s in %d steps", color, src, dst, len(path) - 1)
        # Phase must be Moving before the animation starts in case it completes synchronously.
        self._set_phase(Moving(path=tuple(path)))
        self.event_bus.emit(EVENT_MOVE_COMMITTED, src=src, dst=dst, path=list(path))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='move', snapshot=self.board.snapshot())
        self.event_bus.emit(EVENT_ANIMATION_START, kind='move', items=list(path))

    def _resolve(self) -> None:
        self._set_phase(Resolving())
        cleared = resolve_with_colors(self.board, self.rules.run_length)
        if not cleared:
            return
        positions = sorted(cleared)
        delta = len(cleared) * self.rules.score_per_cell
        self.score += delta
        logger.debug("Cleared %d cells for %d points", len(cleared), delta)
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=positions, colors=dict(cleared))
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=self.score, delta=delta)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='clear', snapshot=self.board.snapshot())
        self.event_bus.emit(EVENT_ANIMATION_START, kind='disappear', items=positions)

    def _refill(self, reason: str) -> bool:
        """Land the pending preview and draw the next one; False when the game ended."""
        self._set_phase(Refilling())
        committed, skipped = spawner.commit(self.board, self.preview)
        self.preview = []
        if committed or skipped:
            self.event_bus.emit(EVENT_REFILL_COMPLETED, new_circles=committed, skipped=skipped)
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason='refill', snapshot=self.board.snapshot())
        try:
            self.preview = spawner.generate(
                self.board,
                self.rules.circles_per_turn,
                rng=self.random,
                colors=self.rules.colors,
            )
        except spawner.InsufficientFreeCells as exc:
            logger.info("Game over (%s) with score %d", exc, self.score)
            self.event_bus.emit(EVENT_PREVIEW_CHANGED, preview=[])
            self._set_phase(GameOver(score=self.score))
            self.event_bus.emit(EVENT_GAME_OVER, score=self.score)
            return False
        self.event_bus.emit(EVENT_PREVIEW_CHANGED, preview=list(self.preview))
        self._set_phase(AwaitingSelection())
        logger.debug("Refill (%s) landed %d circles, skipped %d", reason, len(committed), len(skipped))
        return True

    def _set_phase(self, phase: TurnPhase) -> None:
        previous = self.phase
        self.phase = phase
        if previous != phase:
            self.event_bus.emit(EVENT_PHASE_CHANGED, previous=previous, current=phase)
