import random
from typing import Sequence

from esper import World
from .events.bus import EventBus
from coincrush.components.coin_types import CoinCatalog, CoinType, DEFAULT_COINS
from coincrush.components.game_state import GameState, SessionPhase
from coincrush.components.hint_state import HintState
from coincrush.components.move_stats import MoveStats


def create_world(
    event_bus: EventBus,
    initial_phase: SessionPhase = SessionPhase.IDLE,
    *,
    catalog: Sequence[CoinType] = DEFAULT_COINS,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Session singletons; the board entity itself is owned by BoardSystem.
    world.create_entity(GameState(phase=initial_phase))
    world.create_entity(MoveStats())
    world.create_entity(HintState())
    world.create_entity(CoinCatalog.from_coins(catalog))
    return world
