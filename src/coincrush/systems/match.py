from esper import World

from coincrush.events.bus import EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID, EVENT_TILE_SWAP_INVALID
from coincrush.systems.board_ops import is_adjacent, swap_creates_match
from coincrush.systems.game_state_utils import get_board


class MatchSystem:
    """Gatekeeper for swap requests: only swaps that create a match go through."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        if self.creates_match(src, dst):
            self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        else:
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst)

    def creates_match(self, a: int, b: int) -> bool:
        board = get_board(self.world)
        if board is None:
            return False
        if not is_adjacent(a, b, board.size):
            return False
        return swap_creates_match(board.cells, board.size, a, b)
