from dataclasses import dataclass

@dataclass(slots=True)
class Cell:
    """Single board square.

    Holds only the logical color name and whether the square has joined the
    origin region. Neighbours are looked up through the owning Grid.
    """
    color: str
    flooded: bool = False
