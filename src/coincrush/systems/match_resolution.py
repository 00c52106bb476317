import logging

from esper import World

from coincrush.components.game_state import SessionPhase
from coincrush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CASCADE_COMPLETE,
    EVENT_NO_MOVES,
    EVENT_TILE_SWAP_VALID,
)
from coincrush.systems.board_ops import has_any_moves, resolve_board, swap_cells
from coincrush.systems.game_state_utils import (
    get_board,
    get_catalog,
    get_or_create_game_state,
    get_or_create_hint_state,
    set_phase,
)

logger = logging.getLogger(__name__)


class MatchResolutionSystem:
    """Commits valid swaps and resolves the resulting cascades in one step."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_SWAP_VALID, self.on_swap_valid)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    def on_swap_valid(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        board = get_board(self.world)
        if src is None or dst is None or board is None:
            return
        state = get_or_create_game_state(self.world)
        if state.phase == SessionPhase.RESOLVING:
            return
        set_phase(self.world, self.event_bus, SessionPhase.RESOLVING)
        try:
            kinds = get_catalog(self.world).kind_count()
            swapped = swap_cells(board.cells, src, dst)
            result = resolve_board(swapped, board.size, self.world.random.random, kinds)
            board.cells = result.board
        finally:
            set_phase(self.world, self.event_bus, SessionPhase.IDLE)
        logger.debug("swap %s<->%s cleared %d over %d cascades", src, dst, result.cleared, result.cascades)
        self.event_bus.emit(
            EVENT_CASCADE_COMPLETE,
            cleared=result.cleared,
            cascades=result.cascades,
            src=src,
            dst=dst,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='resolve')

    def on_board_changed(self, sender, **kwargs):
        # Any new board may be dead; re-check so the presentation can offer a shuffle.
        board = get_board(self.world)
        if board is None:
            return
        hint_state = get_or_create_hint_state(self.world)
        hint_state.no_moves = not has_any_moves(board.cells, board.size)
        if hint_state.no_moves:
            self.event_bus.emit(EVENT_NO_MOVES)
