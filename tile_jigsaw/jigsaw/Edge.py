from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Edge:
    """
    A side of a tile, read clockwise around the tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    pixels: Tuple[bool, ...]
    """
    The pixels along the side.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def eq_reverse(self, other) -> bool:
        """
        Returns whether this edge equals the reverse of another edge.

        :param Edge other: The other edge.
        """
        return self.pixels == other.pixels[::-1]

# ----------------------------------------------------------------------------------------------------------------------
