from dataclasses import dataclass


@dataclass(slots=True)
class MoveStats:
    """Tracks per-session move results for the HUD.

    last_combo is the cascade count of the last committed move, floored at 1.
    """

    moves: int = 0
    last_clear: int = 0
    last_combo: int = 1
    total_cleared: int = 0
    cascades: int = 0

    def reset_last(self) -> None:
        self.last_clear = 0
        self.last_combo = 1
