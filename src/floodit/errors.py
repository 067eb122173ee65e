"""Exceptions raised by the flood core."""


class InvalidConfiguration(ValueError):
    """Board size or color count cannot produce a playable game."""


class OutOfBounds(IndexError):
    """A coordinate outside the grid reached a cell lookup.

    Callers are expected to check ``Grid.in_bounds`` first, so this signals a
    programming error rather than a user action.
    """

    def __init__(self, pos, size: int):
        super().__init__(f"Cell {pos} is outside a {size}x{size} grid")
        self.pos = pos
        self.size = size
