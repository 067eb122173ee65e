"""Game state component describing one Flood-It round."""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List, Tuple


class GamePhase(Enum):
    """Outcome of the current round. WON and LOST are terminal until reset."""
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def terminal(self) -> bool:
        return self is not GamePhase.PLAYING


@dataclass
class GameState:
    """Component stored next to the Grid on the game entity."""
    board_size: int
    num_colors: int
    colors: Tuple[str, ...]
    flood_color: str
    moves_allowed: int
    moves_used: int = 0
    phase: GamePhase = GamePhase.PLAYING
    # Cells waiting for their stored color to catch up with flood_color, FIFO.
    pending_repaint: Deque[Tuple[int, int]] = field(default_factory=deque)
    # Flooded cells in discovery order.
    flooded: List[Tuple[int, int]] = field(default_factory=list)
    ticks: int = 0
    elapsed: float = 0.0
