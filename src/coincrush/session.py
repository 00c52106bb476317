"""Headless Coin Crush session.

Wires the world, event bus and board systems together so a presentation layer
only has to forward clicks and button presses and read components back.
"""
import random
from typing import List, Optional, Sequence, Tuple

from coincrush.components.coin_types import CoinType, DEFAULT_COINS
from coincrush.components.game_state import GameState
from coincrush.components.hint_state import HintState
from coincrush.components.move_stats import MoveStats
from coincrush.constants import GRID_SIZE
from coincrush.events.bus import (
    EventBus,
    EVENT_HINT_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SHUFFLE_REQUEST,
    EVENT_TILE_CLICK,
)
from coincrush.systems.board import BoardSystem
from coincrush.systems.game_state_utils import (
    get_or_create_game_state,
    get_or_create_hint_state,
    get_or_create_move_stats,
)
from coincrush.systems.hint_system import HintSystem
from coincrush.systems.match import MatchSystem
from coincrush.systems.match_resolution import MatchResolutionSystem
from coincrush.systems.stats_system import StatsSystem
from coincrush.world import create_world


class CoinCrushSession:
    def __init__(
        self,
        size: int = GRID_SIZE,
        *,
        catalog: Sequence[CoinType] = DEFAULT_COINS,
        seed: Optional[int] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.size = size
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, catalog=catalog, rng=random.Random(seed))
        self.board_system = BoardSystem(self.world, self.event_bus, size=size)
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.stats_system = StatsSystem(self.world, self.event_bus)
        self.hint_system = HintSystem(self.world, self.event_bus)

    @property
    def cells(self) -> List[int]:
        return list(self.board_system.board.cells)

    @property
    def state(self) -> GameState:
        return get_or_create_game_state(self.world)

    @property
    def stats(self) -> MoveStats:
        return get_or_create_move_stats(self.world)

    @property
    def hint(self) -> HintState:
        return get_or_create_hint_state(self.world)

    def click(self, index: int) -> None:
        self.event_bus.emit(EVENT_TILE_CLICK, index=index)

    def click_cell(self, row: int, col: int) -> None:
        self.click(row * self.size + col)

    def request_hint(self) -> Optional[Tuple[int, int]]:
        self.event_bus.emit(EVENT_HINT_REQUEST)
        return self.hint.pair

    def shuffle(self) -> None:
        self.event_bus.emit(EVENT_SHUFFLE_REQUEST)

    def new_game(self) -> None:
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def rows(self) -> List[List[int]]:
        cells = self.cells
        return [cells[row * self.size:(row + 1) * self.size] for row in range(self.size)]

