import random

import pytest
from esper import World

from floodit.components.game_state import GamePhase
from floodit.errors import InvalidConfiguration
from floodit.components.palette import Palette
from floodit.events.bus import EVENT_COLOR_SELECT, EVENT_TICK, EventBus
from floodit.systems.flood_ops import get_game, get_palette
from floodit.systems.flood_system import FloodSystem
from floodit.systems.repaint_system import RepaintSystem
from floodit.utils.snapshot import take_snapshot
from floodit.world import create_world


def test_create_world_defaults():
    world = create_world(EventBus(), rng=random.Random(1))
    palette = get_palette(world)
    assert palette.names()[:4] == ['blue', 'red', 'pink', 'green']
    assert len(palette) == 8
    _, grid, state = get_game(world)
    assert grid.size == 22
    assert state.colors == ('blue', 'red', 'pink', 'green')
    assert state.moves_allowed == 34
    assert state.phase is GamePhase.PLAYING
    assert isinstance(world.random, random.Random)


def test_same_seed_gives_same_board():
    first = create_world(EventBus(), board_size=9, num_colors=5, rng=random.Random(42))
    second = create_world(EventBus(), board_size=9, num_colors=5, rng=random.Random(42))
    assert get_game(first)[1].colors() == get_game(second)[1].colors()


def test_custom_palette_order_drives_active_colors():
    palette = {'cyan': (0, 255, 255), 'black': (0, 0, 0), 'white': (255, 255, 255)}
    world = create_world(EventBus(), board_size=4, num_colors=2, palette=palette,
                         sampler=lambda choices: choices[1])
    _, grid, state = get_game(world)
    assert state.colors == ('cyan', 'black')
    assert grid.is_uniform('black')
    assert get_palette(world).rgb_for('white') == (255, 255, 255)


@pytest.mark.parametrize("board_size,num_colors", [(1, 4), (5, 1), (5, 9)])
def test_create_world_rejects_bad_configuration(board_size, num_colors):
    with pytest.raises(InvalidConfiguration):
        create_world(EventBus(), board_size=board_size, num_colors=num_colors)


def test_snapshot_reflects_state():
    world = create_world(EventBus(), board_size=3, num_colors=3, rng=random.Random(5))
    _, grid, state = get_game(world)
    snap = take_snapshot(world)
    assert snap.board_size == 3
    assert snap.colors == grid.colors()
    assert snap.flood_color == state.flood_color == grid.cell_at((0, 0)).color
    assert snap.moves_used == 0
    assert snap.pending == 0


def test_lookups_fail_on_empty_world():
    world = World()
    with pytest.raises(RuntimeError):
        get_game(world)
    with pytest.raises(RuntimeError):
        get_palette(world)


def test_world_systems_are_subscribed():
    bus = EventBus()
    world = create_world(bus, board_size=3, num_colors=3, rng=random.Random(4))
    assert isinstance(world.flood_system, FloodSystem)
    assert isinstance(world.repaint_system, RepaintSystem)
    _, _, state = get_game(world)
    color = next(c for c in state.colors if c != state.flood_color)
    bus.emit(EVENT_COLOR_SELECT, color=color)
    assert state.moves_used == 1
    bus.emit(EVENT_TICK, dt=0.1)
    assert state.ticks == 1


def test_palette_keeps_insertion_order():
    palette = Palette(colors={'orange': (255, 200, 0), 'blue': (0, 0, 255), 'gray': (128, 128, 128)})
    assert palette.names() == ['orange', 'blue', 'gray']
    assert len(palette) == 3
    assert palette.rgb_for('blue') == (0, 0, 255)
