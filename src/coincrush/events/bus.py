from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody holds a reference to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                    # payload: index=int
EVENT_HINT_REQUEST = "hint_request"                # payload: None
EVENT_SHUFFLE_REQUEST = "shuffle_request"          # payload: None
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: index=int, previous=int|None
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: index=int, reason=str
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=int, dst=int
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=int, dst=int
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=int, dst=int
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: cleared=int, cascades=int, src=int, dst=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str
EVENT_NO_MOVES = "no_moves"                        # payload: None


# ============================================================================
# SESSION STATE
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous=SessionPhase, new=SessionPhase
EVENT_STATS_CHANGED = "stats_changed"              # payload: stats=MoveStats
EVENT_HINT_SHOWN = "hint_shown"                    # payload: pair=tuple[int,int]|None
EVENT_HINT_CLEARED = "hint_cleared"                # payload: None
