from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class HintState:
    """Last hint shown to the player and whether the board is dead."""

    pair: Optional[Tuple[int, int]] = None
    no_moves: bool = False
