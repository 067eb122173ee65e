import logging
import random
from typing import Callable, Dict, Sequence, Tuple

from esper import World
from .events.bus import EventBus
from floodit.components.palette import Palette
from floodit.components.palette_registry import PaletteRegistry
from floodit.constants import DEFAULT_BOARD_SIZE, DEFAULT_NUM_COLORS, DEFAULT_PALETTE
from floodit.systems.flood_ops import new_game
from floodit.systems.flood_system import FloodSystem
from floodit.systems.repaint_system import RepaintSystem

logger = logging.getLogger(__name__)


def create_world(
    event_bus: EventBus,
    *,
    board_size: int = DEFAULT_BOARD_SIZE,
    num_colors: int = DEFAULT_NUM_COLORS,
    rng: random.Random | None = None,
    sampler: Callable[[Sequence[str]], str] | None = None,
    palette: Dict[str, Tuple[int, int, int]] | None = None,
) -> World:
    """Build a world holding the palette entity and a freshly generated game.

    ``sampler`` picks each cell's color from the active palette names; when
    omitted the world's ``random`` instance is used. The flood and repaint
    systems are subscribed to ``event_bus`` and attached to the world as
    ``flood_system`` and ``repaint_system``. Raises InvalidConfiguration for
    an unplayable size or color count.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "color_sampler", sampler)

    # Create single registry entity with canonical colors
    world.create_entity(
        PaletteRegistry(),
        Palette(colors=dict(palette or DEFAULT_PALETTE)),
    )

    grid, state = new_game(
        board_size,
        num_colors,
        sampler or world.random.choice,
        list(palette or DEFAULT_PALETTE),
    )
    world.create_entity(grid, state)
    logger.info("Created %dx%d board with %d colors, %d moves allowed",
                board_size, board_size, num_colors, state.moves_allowed)

    setattr(world, "flood_system", FloodSystem(world, event_bus))
    setattr(world, "repaint_system", RepaintSystem(world, event_bus))
    return world
