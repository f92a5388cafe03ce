from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    size: int
    # Tile entities ordered by tile position.
    tile_entities: List[int] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return self.size * self.size
