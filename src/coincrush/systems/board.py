import logging
from typing import Optional

from esper import World

from coincrush.components.board import Board
from coincrush.components.game_state import SessionPhase
from coincrush.constants import GRID_SIZE
from coincrush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SHUFFLE_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_REQUEST,
)
from coincrush.systems.board_ops import create_playable_board, is_adjacent
from coincrush.systems.game_state_utils import get_catalog, get_or_create_game_state, set_phase

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and turns tile clicks into swap requests."""

    def __init__(self, world: World, event_bus: EventBus, size: int = GRID_SIZE):
        self.world = world
        self.event_bus = event_bus
        self.size = size
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(size=size, cells=self._generate()))
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game)
        self.event_bus.subscribe(EVENT_SHUFFLE_REQUEST, self.on_shuffle)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def selected(self) -> Optional[int]:
        return get_or_create_game_state(self.world).selected

    def on_tile_click(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None or not 0 <= index < self.size * self.size:
            return
        state = get_or_create_game_state(self.world)
        if state.phase == SessionPhase.RESOLVING:
            return
        current = state.selected
        if current is None:
            self._select(index)
        elif current == index:
            self._deselect(reason='toggle')
        elif not is_adjacent(current, index, self.size):
            # Clicking elsewhere moves the selection instead of swapping.
            self._select(index, previous=current)
        else:
            state.selected = None
            set_phase(self.world, self.event_bus, SessionPhase.IDLE)
            self.event_bus.emit(EVENT_TILE_SWAP_REQUEST, src=current, dst=index)

    def on_new_game(self, sender, **kwargs):
        self._regenerate(reason='new_game')

    def on_shuffle(self, sender, **kwargs):
        self._regenerate(reason='shuffle')

    def _select(self, index: int, previous: Optional[int] = None) -> None:
        state = get_or_create_game_state(self.world)
        state.selected = index
        set_phase(self.world, self.event_bus, SessionPhase.SELECTING)
        self.event_bus.emit(EVENT_TILE_SELECTED, index=index, previous=previous)

    def _deselect(self, reason: str) -> None:
        state = get_or_create_game_state(self.world)
        prev = state.selected
        if prev is None:
            return
        state.selected = None
        set_phase(self.world, self.event_bus, SessionPhase.IDLE)
        self.event_bus.emit(EVENT_TILE_DESELECTED, index=prev, reason=reason)

    def _regenerate(self, reason: str) -> None:
        state = get_or_create_game_state(self.world)
        if state.phase == SessionPhase.RESOLVING:
            return
        self._deselect(reason=reason)
        self.board.cells = self._generate()
        logger.debug("board regenerated (%s)", reason)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason)

    def _generate(self):
        kinds = get_catalog(self.world).kind_count()
        return create_playable_board(self.size, self.world.random.random, kinds)
