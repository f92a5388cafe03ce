from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Tile:
    """A single grid cell.

    position is the 0-based cell index, stable for the whole session.
    value is the pairing key; two tiles with equal values form a pair.
    """
    position: int
    value: int


@dataclass(slots=True)
class Unpaired:
    """Marker for the one tile on an odd-sized board whose value has no partner."""
    pass
