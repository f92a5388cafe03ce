from __future__ import annotations

import random
from collections import Counter
from typing import Iterable, List

from memorygame.components.tile import Tile
from memorygame.constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE


class DeckBuilder:
    """Builds the shuffled tile sequence for a square board.

    Every value from 1..pairs is placed twice. An odd cell count leaves one cell
    without a partner; it receives the extra value ``pairs + 1`` so the board is
    always fully populated and exactly one tile is an orphan.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def build(self, size: int) -> List[Tile]:
        if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            raise ValueError(f"board size must be in [{MIN_BOARD_SIZE}, {MAX_BOARD_SIZE}], got {size}")
        total_cells = size * size
        pair_count = total_cells // 2
        values = [value for value in range(1, pair_count + 1) for _ in range(2)]
        if len(values) < total_cells:
            values.append(pair_count + 1)
        # random.Random.shuffle is an in-place Fisher-Yates shuffle.
        self.rng.shuffle(values)
        return [Tile(position=index, value=value) for index, value in enumerate(values)]


def orphan_values(deck: Iterable[Tile]) -> set[int]:
    """Return the values that appear on exactly one tile."""
    counts = Counter(tile.value for tile in deck)
    return {value for value, count in counts.items() if count == 1}
