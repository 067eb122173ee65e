"""Host-loop facade for the Flood-It core.

Sets up the event bus, world and systems, and translates the host's frame,
click and key callbacks into bus events. Drawing stays with the host: it reads
``snapshot()`` each frame.
"""
import random
from typing import Callable, Optional, Sequence

from floodit.constants import DEFAULT_BOARD_SIZE, DEFAULT_NUM_COLORS, DEFAULT_TICK_DT, RESET_KEY
from floodit.events.bus import (EventBus, EVENT_TICK, EVENT_CELL_CLICK, EVENT_COLOR_SELECT,
                                EVENT_RESET_REQUEST)
from floodit.utils.snapshot import BoardSnapshot, take_snapshot
from floodit.utils.summary import end_message
from floodit.world import create_world


class FloodItGame:
    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        num_colors: int = DEFAULT_NUM_COLORS,
        *,
        rng: Optional[random.Random] = None,
        sampler: Optional[Callable[[Sequence[str]], str]] = None,
    ):
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            board_size=board_size,
            num_colors=num_colors,
            rng=rng,
            sampler=sampler,
        )
        self.flood_system = self.world.flood_system
        self.repaint_system = self.world.repaint_system

    def on_update(self, delta_time: float = DEFAULT_TICK_DT):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_cell_click(self, row: int, col: int):
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def on_key_press(self, key: str):
        if key == RESET_KEY:
            self.event_bus.emit(EVENT_RESET_REQUEST)

    def select_color(self, color: str):
        self.event_bus.emit(EVENT_COLOR_SELECT, color=color)

    def reset(self, board_size: Optional[int] = None, num_colors: Optional[int] = None,
              sampler: Optional[Callable[[Sequence[str]], str]] = None):
        self.event_bus.emit(EVENT_RESET_REQUEST, board_size=board_size, num_colors=num_colors, sampler=sampler)

    def snapshot(self) -> BoardSnapshot:
        return take_snapshot(self.world)

    def end_message(self) -> str:
        return end_message(self.snapshot())
