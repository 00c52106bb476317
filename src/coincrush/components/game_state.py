"""Session state resource describing where the player is in a move."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class SessionPhase(Enum):
    """Interaction phases; clicks are only honoured outside RESOLVING."""
    IDLE = auto()
    SELECTING = auto()
    RESOLVING = auto()


@dataclass(slots=True)
class GameState:
    """Singleton component storing the active phase and the selected cell."""
    phase: SessionPhase = SessionPhase.IDLE
    selected: Optional[int] = None
