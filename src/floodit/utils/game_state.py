from __future__ import annotations

import logging

from esper import World

from floodit.components.game_state import GamePhase
from floodit.events.bus import EVENT_PHASE_CHANGED, EventBus
from floodit.systems.flood_ops import evaluate_phase, get_game

logger = logging.getLogger(__name__)


def refresh_phase(world: World, event_bus: EventBus) -> GamePhase:
    """Re-evaluate the round outcome and emit a change event when it differs.

    A terminal phase sticks until the game is reset.
    """
    _, grid, state = get_game(world)
    previous_phase = state.phase
    if previous_phase.terminal:
        return previous_phase
    phase = evaluate_phase(grid, state)
    if phase is previous_phase:
        return phase
    state.phase = phase
    logger.info(
        "Phase %s -> %s after %d/%d moves",
        previous_phase.name, phase.name, state.moves_used, state.moves_allowed,
    )
    event_bus.emit(
        EVENT_PHASE_CHANGED,
        previous_phase=previous_phase,
        new_phase=phase,
        moves_used=state.moves_used,
        moves_allowed=state.moves_allowed,
        elapsed=state.elapsed,
    )
    return phase
