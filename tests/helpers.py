from __future__ import annotations

from typing import Sequence

from esper import World

from floodit.components.grid import Grid
from floodit.events.bus import EVENT_TICK, EventBus
from floodit.world import create_world


def layout_sampler(rows: Sequence[Sequence[str]]):
    """Sampler that replays ``rows`` in row-major order, ignoring the choices offered."""

    colors = iter([color for row in rows for color in row])

    def sample(choices: Sequence[str]) -> str:
        return next(colors)

    return sample


def world_from_layout(bus: EventBus, rows: Sequence[Sequence[str]], num_colors: int = 2) -> World:
    return create_world(
        bus,
        board_size=len(rows),
        num_colors=num_colors,
        sampler=layout_sampler(rows),
    )


def drive(bus: EventBus, ticks: int, dt: float = 0.02) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def origin_region(grid: Grid) -> set[tuple[int, int]]:
    """Same-color region connected to (0, 0), computed independently of the engine."""

    color = grid.cells[0][0].color
    seen = {(0, 0)}
    stack = [(0, 0)]
    while stack:
        row, col = stack.pop()
        for nr, nc in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if not (0 <= nr < grid.size and 0 <= nc < grid.size):
                continue
            if (nr, nc) in seen or grid.cells[nr][nc].color != color:
                continue
            seen.add((nr, nc))
            stack.append((nr, nc))
    return seen


class EventCapture:
    """Records payloads of the named events in emission order."""

    def __init__(self, bus: EventBus, *names: str):
        self.received: list[tuple[str, dict]] = []
        for name in names:
            bus.subscribe(name, self._recorder(name))

    def _recorder(self, name: str):
        def record(sender, **payload):
            self.received.append((name, payload))
        return record

    def payloads(self, name: str) -> list[dict]:
        return [payload for event, payload in self.received if event == name]

    def names(self) -> list[str]:
        return [event for event, _ in self.received]
