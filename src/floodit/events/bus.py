from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# PLAYER INTENTS
# ============================================================================
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_COLOR_SELECT = "color_select"        # payload: color=str
EVENT_RESET_REQUEST = "reset_request"      # payload: board_size=int|None, num_colors=int|None, sampler=Callable|None


# ============================================================================
# FLOODING & REPAINT
# ============================================================================
EVENT_FLOOD_STARTED = "flood_started"      # payload: color=str, positions=[(r,c),...], absorbed=[(r,c),...], moves_used=int, moves_allowed=int
EVENT_COLOR_IGNORED = "color_ignored"      # payload: color=str|None, reason=str
EVENT_CELL_REPAINTED = "cell_repainted"    # payload: row, col, color=str, remaining=int
EVENT_REPAINT_COMPLETE = "repaint_complete"  # payload: color=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"      # payload: previous_phase=GamePhase, new_phase=GamePhase, moves_used=int, moves_allowed=int, elapsed=float
EVENT_GAME_RESET = "game_reset"            # payload: board_size=int, num_colors=int, moves_allowed=int
