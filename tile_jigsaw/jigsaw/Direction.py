from enum import Enum, STRICT
from typing import Tuple


class Direction(Enum, boundary=STRICT):
    """
    Enumeration for the sides of a tile in clockwise order.
    """
    # ------------------------------------------------------------------------------------------------------------------
    TOP = 0
    """
    Top side.
    """

    RIGHT = 1
    """
    Right side.
    """

    BOTTOM = 2
    """
    Bottom side.
    """

    LEFT = 3
    """
    Left side.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def is_horizontal(self) -> bool:
        """
        Returns whether a neighbour at this side is found along the x-axis.
        """
        return self in (Direction.RIGHT, Direction.LEFT)

    # ------------------------------------------------------------------------------------------------------------------
    def offset(self) -> Tuple[int, int]:
        """
        Returns the offset of the grid coordinate of a neighbour at this side.
        """
        if self == Direction.TOP:
            return 0, -1
        if self == Direction.RIGHT:
            return 1, 0
        if self == Direction.BOTTOM:
            return 0, 1

        return -1, 0

# ----------------------------------------------------------------------------------------------------------------------
