from dataclasses import dataclass

@dataclass(slots=True)
class PaletteRegistry:
    """Empty tag component marking the single entity that stores the Palette."""
    pass
