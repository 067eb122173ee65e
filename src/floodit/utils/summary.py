"""Text shown in the HUD and on the end screen."""
from __future__ import annotations

from floodit.components.game_state import GamePhase
from floodit.utils.snapshot import BoardSnapshot


def format_elapsed(seconds: float) -> str:
    total = max(0, int(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def score_text(snapshot: BoardSnapshot) -> str:
    return f"{snapshot.moves_used}/{snapshot.moves_allowed}"


def end_message(snapshot: BoardSnapshot) -> str:
    """Closing line for a finished round; empty while the round is still running."""
    if snapshot.phase is GamePhase.WON:
        return (
            f"You Won in {format_elapsed(snapshot.elapsed)} "
            f"with {score_text(snapshot)} tries!"
        )
    if snapshot.phase is GamePhase.LOST:
        return "You Lost!"
    return ""
