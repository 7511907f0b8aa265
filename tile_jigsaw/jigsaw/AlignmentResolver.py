from typing import List

from tile_jigsaw.jigsaw.Alignment import Alignment
from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.Edge import Edge


class AlignmentResolver:
    """
    Class for finding how a tile attaches to a reference tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def rotations_clockwise(reference_slot: int, candidate_slot: int) -> int:
        """
        Returns the number of clockwise quarter turns that bring a side of the candidate tile opposite to a side of
        the reference tile.

        :param reference_slot: The index of the side of the reference tile.
        :param candidate_slot: The index of the side of the candidate tile.
        """
        return (reference_slot - candidate_slot + 2) % 4

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def align(reference: List[Edge], candidate: List[Edge]) -> Alignment | None:
        """
        Returns how a candidate tile attaches to a reference tile. Returns None if the tiles do not touch.

        :param reference: The clockwise edges of the reference tile.
        :param candidate: The clockwise edges of the candidate tile.
        """
        for reference_slot, reference_edge in enumerate(reference):
            location = Direction(reference_slot)
            for candidate_slot, candidate_edge in enumerate(candidate):
                rotations = AlignmentResolver.rotations_clockwise(reference_slot, candidate_slot)

                if reference_edge == candidate_edge:
                    # Both edges are read clockwise, hence equal edges run in the same direction and the candidate
                    # must be mirrored.
                    return Alignment(location=location,
                                     rotations_clockwise=rotations,
                                     flip_x=not location.is_horizontal(),
                                     flip_y=location.is_horizontal())

                if reference_edge.eq_reverse(candidate_edge):
                    return Alignment(location=location,
                                     rotations_clockwise=rotations,
                                     flip_x=False,
                                     flip_y=False)

        return None

# ----------------------------------------------------------------------------------------------------------------------
