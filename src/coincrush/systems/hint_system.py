from esper import World

from coincrush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_HINT_CLEARED,
    EVENT_HINT_REQUEST,
    EVENT_HINT_SHOWN,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_REQUEST,
)
from coincrush.systems.board_ops import find_hint
from coincrush.systems.game_state_utils import get_board, get_or_create_hint_state


class HintSystem:
    """Looks up a suggested swap on demand and drops it once it goes stale."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)
        event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_stale)
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_stale)

    def on_hint_request(self, sender, **payload) -> None:
        board = get_board(self.world)
        if board is None:
            return
        hint_state = get_or_create_hint_state(self.world)
        hint_state.pair = find_hint(board.cells, board.size)
        self.event_bus.emit(EVENT_HINT_SHOWN, pair=hint_state.pair)

    def on_tile_selected(self, sender, **payload) -> None:
        # A first pick keeps the hint visible; moving the pick elsewhere drops it.
        if payload.get("previous") is None:
            return
        self.on_stale(sender, **payload)

    def on_stale(self, sender, **payload) -> None:
        hint_state = get_or_create_hint_state(self.world)
        if hint_state.pair is None:
            return
        hint_state.pair = None
        self.event_bus.emit(EVENT_HINT_CLEARED)
