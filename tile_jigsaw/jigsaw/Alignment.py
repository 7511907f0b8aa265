from dataclasses import dataclass

from tile_jigsaw.jigsaw.Direction import Direction


@dataclass(frozen=True)
class Alignment:
    """
    How a tile must be transformed and where it must be placed to attach to a reference tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    location: Direction
    """
    The side of the reference tile at which the tile attaches.
    """

    rotations_clockwise: int
    """
    The number of clockwise quarter turns to apply to the tile.
    """

    flip_x: bool
    """
    Whether to mirror the tile along the x-axis after rotating.
    """

    flip_y: bool
    """
    Whether to mirror the tile along the y-axis after rotating.
    """

# ----------------------------------------------------------------------------------------------------------------------
