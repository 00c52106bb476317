from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    """The current board value owned by the session.

    cells is flat and row-major (index = row * size + col). Systems replace it
    wholesale with the lists returned by board_ops; nothing edits it in place.
    """
    size: int
    cells: List[int] = field(default_factory=list)
