import logging
import random
from typing import Optional

from esper import World
from floodit.events.bus import (EventBus, EVENT_CELL_CLICK, EVENT_COLOR_SELECT, EVENT_RESET_REQUEST,
                                EVENT_FLOOD_STARTED, EVENT_COLOR_IGNORED, EVENT_GAME_RESET,
                                EVENT_PHASE_CHANGED)
from floodit.components.grid import ColorSampler
from floodit.systems.flood_ops import get_game, reset_game, select_color, selection_block_reason
from floodit.utils.game_state import refresh_phase

logger = logging.getLogger(__name__)


class FloodSystem:
    """Turns player intents into flood moves and resets."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_COLOR_SELECT, self.on_color_select)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        _, grid, _ = get_game(self.world)
        # Clicks that miss the board are ordinary input, not errors.
        if not grid.in_bounds((row, col)):
            return
        self.select(grid.cell_at((row, col)).color)

    def on_color_select(self, sender, **kwargs):
        color = kwargs.get('color')
        if color is None:
            return
        self.select(color)

    def on_reset_request(self, sender, **kwargs):
        self.reset(
            board_size=kwargs.get('board_size'),
            num_colors=kwargs.get('num_colors'),
            sampler=kwargs.get('sampler'),
        )

    def select(self, color: str) -> bool:
        _, grid, state = get_game(self.world)
        reason = selection_block_reason(state, color)
        if reason is not None:
            logger.debug("Ignoring selection of %s: %s", color, reason)
            self.event_bus.emit(EVENT_COLOR_IGNORED, color=color, reason=reason)
            return False
        flooded_before = len(state.flooded)
        select_color(grid, state, color)
        positions = list(state.pending_repaint)
        # Cells absorbed by this move were appended to the tail of the flooded list.
        absorbed = state.flooded[flooded_before:]
        self.event_bus.emit(
            EVENT_FLOOD_STARTED,
            color=color,
            positions=positions,
            absorbed=absorbed,
            moves_used=state.moves_used,
            moves_allowed=state.moves_allowed,
        )
        refresh_phase(self.world, self.event_bus)
        return True

    def reset(
        self,
        *,
        board_size: Optional[int] = None,
        num_colors: Optional[int] = None,
        sampler: Optional[ColorSampler] = None,
    ) -> None:
        _, _, current = get_game(self.world)
        previous_phase = current.phase
        if sampler is not None:
            grid, state = reset_game(self.world, sampler, board_size=board_size, num_colors=num_colors)
        else:
            grid, state = self._reset_with_world_sampler(board_size, num_colors)
        logger.info("New %dx%d board with %d colors, %d moves allowed",
                    grid.size, grid.size, state.num_colors, state.moves_allowed)
        self.event_bus.emit(
            EVENT_GAME_RESET,
            board_size=state.board_size,
            num_colors=state.num_colors,
            moves_allowed=state.moves_allowed,
        )
        # Leaving an end screen, or landing on a board that starts uniform.
        if state.phase is not previous_phase:
            self.event_bus.emit(
                EVENT_PHASE_CHANGED,
                previous_phase=previous_phase,
                new_phase=state.phase,
                moves_used=state.moves_used,
                moves_allowed=state.moves_allowed,
                elapsed=state.elapsed,
            )

    def _reset_with_world_sampler(self, board_size, num_colors):
        sampler = getattr(self.world, "color_sampler", None)
        if sampler is not None:
            try:
                return reset_game(self.world, sampler, board_size=board_size, num_colors=num_colors)
            except StopIteration:
                # One-shot samplers (fixed layouts) only cover the first board.
                logger.info("Stored color sampler exhausted; falling back to world random")
                setattr(self.world, "color_sampler", None)
        return reset_game(self.world, self._random_sampler(), board_size=board_size, num_colors=num_colors)

    def _random_sampler(self) -> ColorSampler:
        rng = getattr(self.world, "random", None) or random.Random()
        return rng.choice
