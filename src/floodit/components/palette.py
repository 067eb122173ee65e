from dataclasses import dataclass
from typing import Dict, List, Tuple

@dataclass(slots=True)
class Palette:
    """Canonical logical colors stored on a single entity.

    Lives alongside the PaletteRegistry tag. Insertion order matters: a game
    with ``num_colors`` colors plays with the first ``num_colors`` names.
    """
    colors: Dict[str, Tuple[int, int, int]]

    def names(self) -> List[str]:
        return list(self.colors)

    def rgb_for(self, name: str) -> Tuple[int, int, int]:
        return self.colors[name]

    def __len__(self) -> int:
        return len(self.colors)
