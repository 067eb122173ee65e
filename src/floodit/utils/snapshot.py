from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from floodit.components.game_state import GamePhase
from floodit.systems.flood_ops import get_game


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view handed to the presentation layer once per frame."""

    board_size: int
    colors: Tuple[Tuple[str, ...], ...]
    flood_color: str
    moves_used: int
    moves_allowed: int
    phase: GamePhase
    pending: int
    ticks: int
    elapsed: float

    def color_at(self, row: int, col: int) -> str:
        return self.colors[row][col]

    @property
    def animating(self) -> bool:
        return self.pending > 0


def take_snapshot(world: World) -> BoardSnapshot:
    _, grid, state = get_game(world)
    return BoardSnapshot(
        board_size=grid.size,
        colors=grid.colors(),
        flood_color=state.flood_color,
        moves_used=state.moves_used,
        moves_allowed=state.moves_allowed,
        phase=state.phase,
        pending=len(state.pending_repaint),
        ticks=state.ticks,
        elapsed=state.elapsed,
    )
