from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from esper import World

from floodit.components.game_state import GamePhase, GameState
from floodit.components.grid import ColorSampler, Grid, Position
from floodit.components.palette import Palette
from floodit.components.palette_registry import PaletteRegistry
from floodit.constants import DEFAULT_PALETTE

logger = logging.getLogger(__name__)

ORIGIN: Position = (0, 0)


def get_palette(world: World) -> Palette:
    for entity, _ in world.get_component(PaletteRegistry):
        return world.component_for_entity(entity, Palette)
    raise RuntimeError("Palette definitions not found")


def get_game(world: World) -> Tuple[int, Grid, GameState]:
    """Return (entity, grid, state) for the single game entity."""
    for entity, (grid, state) in world.get_components(Grid, GameState):
        return entity, grid, state
    raise RuntimeError("Game entity not found")


def compute_moves_allowed(board_size: int, num_colors: int) -> int:
    if board_size <= num_colors:
        return num_colors
    return board_size + 3 * num_colors


def new_game(
    board_size: int,
    num_colors: int,
    sampler: ColorSampler,
    palette: Sequence[str] | None = None,
) -> Tuple[Grid, GameState]:
    """Generate a grid and flood the origin's initial same-color region."""
    names = list(palette) if palette is not None else list(DEFAULT_PALETTE)
    grid = Grid.create(board_size, num_colors, sampler, names)
    origin = grid.cell_at(ORIGIN)
    origin.flooded = True
    state = GameState(
        board_size=board_size,
        num_colors=num_colors,
        colors=tuple(names[:num_colors]),
        flood_color=origin.color,
        moves_allowed=compute_moves_allowed(board_size, num_colors),
        flooded=[ORIGIN],
    )
    assign_flood(grid, state)
    state.phase = evaluate_phase(grid, state)
    return grid, state


def assign_flood(grid: Grid, state: GameState) -> List[Position]:
    """Grow the flooded region toward ``state.flood_color`` and rebuild the worklist.

    Walks the flooded list in discovery order while it grows, so cells absorbed
    during the walk have their own neighbours examined in the same pass. Every
    flooded cell whose stored color differs from the target is queued for
    repaint in that same order. Returns the newly absorbed positions.
    """
    target = state.flood_color
    state.pending_repaint.clear()
    absorbed: List[Position] = []
    index = 0
    while index < len(state.flooded):
        pos = state.flooded[index]
        if grid.cell_at(pos).color != target:
            state.pending_repaint.append(pos)
        for neighbor in grid.neighbors(pos):
            cell = grid.cell_at(neighbor)
            if not cell.flooded and cell.color == target:
                cell.flooded = True
                state.flooded.append(neighbor)
                absorbed.append(neighbor)
        index += 1
    logger.debug(
        "Flood toward %s absorbed %d cells, %d queued for repaint",
        target, len(absorbed), len(state.pending_repaint),
    )
    return absorbed


def selection_block_reason(state: GameState, color: str) -> str | None:
    """Why a selection of ``color`` would be ignored, or None if it counts as a move."""
    if state.phase.terminal:
        return "game_over"
    if state.pending_repaint:
        return "animating"
    if color == state.flood_color:
        return "same_color"
    if color not in state.colors:
        return "unknown_color"
    if state.moves_used >= state.moves_allowed:
        return "no_moves_left"
    return None


def select_color(grid: Grid, state: GameState, color: str) -> bool:
    reason = selection_block_reason(state, color)
    if reason is not None:
        logger.debug("Ignoring selection of %s: %s", color, reason)
        return False
    state.flood_color = color
    assign_flood(grid, state)
    state.moves_used += 1
    return True


def tick(grid: Grid, state: GameState, dt: float = 0.0) -> Position | None:
    """Advance one scheduler step: repaint at most one queued cell."""
    state.ticks += 1
    if state.phase is GamePhase.PLAYING:
        state.elapsed += dt
    if not state.pending_repaint:
        return None
    pos = state.pending_repaint.popleft()
    grid.cell_at(pos).color = state.flood_color
    return pos


def evaluate_phase(grid: Grid, state: GameState) -> GamePhase:
    # Full scan every time; no incremental "uniform" flag to keep in sync.
    if grid.is_uniform(state.flood_color):
        return GamePhase.WON
    if state.moves_used >= state.moves_allowed and not state.pending_repaint:
        return GamePhase.LOST
    return GamePhase.PLAYING


def reset_game(
    world: World,
    sampler: ColorSampler,
    *,
    board_size: int | None = None,
    num_colors: int | None = None,
) -> Tuple[Grid, GameState]:
    """Rebuild grid and state on the existing game entity.

    Missing sizes fall back to the current round's configuration. Raises
    InvalidConfiguration before touching the world when the request is invalid.
    """
    entity, _, current = get_game(world)
    size = current.board_size if board_size is None else board_size
    count = current.num_colors if num_colors is None else num_colors
    grid, state = new_game(size, count, sampler, get_palette(world).names())
    world.add_component(entity, grid)
    world.add_component(entity, state)
    return grid, state
