from esper import World

from coincrush.components.board import Board
from coincrush.components.coin_types import CoinCatalog
from coincrush.components.game_state import GameState, SessionPhase
from coincrush.components.hint_state import HintState
from coincrush.components.move_stats import MoveStats
from coincrush.events.bus import EventBus, EVENT_PHASE_CHANGED


def get_or_create_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    existing = list(world.get_component(GameState))
    if existing:
        return existing[0][1]
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def get_or_create_move_stats(world: World) -> MoveStats:
    existing = list(world.get_component(MoveStats))
    if existing:
        return existing[0][1]
    world.create_entity(MoveStats())
    return list(world.get_component(MoveStats))[0][1]


def get_or_create_hint_state(world: World) -> HintState:
    existing = list(world.get_component(HintState))
    if existing:
        return existing[0][1]
    world.create_entity(HintState())
    return list(world.get_component(HintState))[0][1]


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def get_catalog(world: World) -> CoinCatalog:
    for _, catalog in world.get_component(CoinCatalog):
        return catalog
    raise RuntimeError("CoinCatalog definitions not found")


def set_phase(world: World, event_bus: EventBus, phase: SessionPhase) -> None:
    state = get_or_create_game_state(world)
    previous = state.phase
    if previous == phase:
        return
    state.phase = phase
    event_bus.emit(EVENT_PHASE_CHANGED, previous=previous, new=phase)
