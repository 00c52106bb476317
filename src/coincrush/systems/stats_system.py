from esper import World

from coincrush.components.move_stats import MoveStats
from coincrush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CASCADE_COMPLETE,
    EVENT_STATS_CHANGED,
)
from coincrush.systems.game_state_utils import get_or_create_move_stats


class StatsSystem:
    """Accumulates cleared and cascade counts per committed move.

    Point values are left to the caller; this only records what the board did.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_CASCADE_COMPLETE, self.on_cascade_complete)
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    @property
    def stats(self) -> MoveStats:
        return get_or_create_move_stats(self.world)

    def on_cascade_complete(self, sender, **payload) -> None:
        cleared = payload.get("cleared")
        cascades = payload.get("cascades")
        if cleared is None or cascades is None:
            return
        stats = self.stats
        stats.moves += 1
        stats.last_clear = cleared
        stats.last_combo = max(1, cascades)
        stats.total_cleared += cleared
        stats.cascades += cascades
        self.event_bus.emit(EVENT_STATS_CHANGED, stats=stats)

    def on_board_changed(self, sender, **payload) -> None:
        reason = payload.get("reason")
        stats = self.stats
        if reason == "new_game":
            stats.moves = 0
            stats.total_cleared = 0
            stats.cascades = 0
            stats.reset_last()
        elif reason == "shuffle":
            stats.reset_last()
        else:
            return
        self.event_bus.emit(EVENT_STATS_CHANGED, stats=stats)
