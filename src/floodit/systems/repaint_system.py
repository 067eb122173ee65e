from esper import World

from floodit.constants import DEFAULT_TICK_DT
from floodit.events.bus import EventBus, EVENT_TICK, EVENT_CELL_REPAINTED, EVENT_REPAINT_COMPLETE
from floodit.systems.flood_ops import get_game, tick
from floodit.utils.game_state import refresh_phase


class RepaintSystem:
    """Drains the repaint queue one cell per tick.

    The flood itself is resolved the moment a color is picked; this system
    only replays the result so large floods spread visibly over many frames.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', DEFAULT_TICK_DT)
        _, grid, state = get_game(self.world)
        pos = tick(grid, state, dt)
        if pos is not None:
            remaining = len(state.pending_repaint)
            self.event_bus.emit(
                EVENT_CELL_REPAINTED,
                row=pos[0],
                col=pos[1],
                color=state.flood_color,
                remaining=remaining,
            )
            if not remaining:
                self.event_bus.emit(EVENT_REPAINT_COMPLETE, color=state.flood_color)
        refresh_phase(self.world, self.event_bus)
