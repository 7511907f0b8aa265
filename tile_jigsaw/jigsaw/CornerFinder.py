from typing import List

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.AlignmentResolver import AlignmentResolver
from tile_jigsaw.jigsaw.Tile import Tile


class CornerFinder:
    """
    Class for finding the corner tiles without assembling the jigsaw.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, tiles: List[Tile]):
        """
        Object constructor.

        :param io: The Output decorator.
        :param tiles: The tiles.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._tiles: List[Tile] = tiles
        """
        The tiles.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def find_corners(self) -> List[Tile]:
        """
        Returns the tiles that touch exactly two other tiles.
        """
        edges = [tile.edges() for tile in self._tiles]

        corners = []
        for index, tile in enumerate(self._tiles):
            neighbours = 0
            for other_index, other_edges in enumerate(edges):
                if other_index != index and AlignmentResolver.align(other_edges, edges[index]) is not None:
                    neighbours += 1

            self._io.log_very_verbose(f'Tile {tile.id} touches {neighbours} tile(s).')
            if neighbours == 2:
                corners.append(tile)

        return corners

# ----------------------------------------------------------------------------------------------------------------------
