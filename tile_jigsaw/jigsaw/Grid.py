from typing import Dict, List, Tuple

from tile_jigsaw.jigsaw.AssemblyError import AssemblyError
from tile_jigsaw.jigsaw.Tile import Tile


class Grid:
    """
    Placed tiles indexed by their grid coordinates.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, tiles: Dict[Tuple[int, int], Tile]):
        """
        Object constructor.

        :param tiles: The placed tiles. The grid takes ownership of the tiles.
        """
        if not tiles:
            raise AssemblyError('Unable to create a grid without tiles.')

        self._tiles: Dict[Tuple[int, int], Tile] = tiles
        """
        The placed tiles indexed by their grid coordinates.
        """

        self._min: Tuple[int, int] = (0, 0)
        """
        The smallest x and y grid coordinates.
        """

        self._max: Tuple[int, int] = (0, 0)
        """
        The largest x and y grid coordinates.
        """

        self._update_bounds()

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tiles(self) -> Dict[Tuple[int, int], Tile]:
        """
        Returns the placed tiles indexed by their grid coordinates.
        """
        return self._tiles

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def min(self) -> Tuple[int, int]:
        """
        Returns the smallest x and y grid coordinates.
        """
        return self._min

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def max(self) -> Tuple[int, int]:
        """
        Returns the largest x and y grid coordinates.
        """
        return self._max

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tiles_wide(self) -> int:
        """
        Returns the number of tiles along the x-axis.
        """
        return self.max[0] - self.min[0] + 1

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tiles_high(self) -> int:
        """
        Returns the number of tiles along the y-axis.
        """
        return self.max[1] - self.min[1] + 1

    # ------------------------------------------------------------------------------------------------------------------
    def is_rectangular(self) -> bool:
        """
        Returns whether the placed tiles form a rectangle without gaps.
        """
        return len(self._tiles) == self.tiles_wide * self.tiles_high

    # ------------------------------------------------------------------------------------------------------------------
    def tile_at(self, x: int, y: int) -> Tile | None:
        """
        Returns the tile at a position relative to the top left tile of this grid.

        :param x: The column of the tile.
        :param y: The row of the tile.
        """
        min_x, min_y = self.min

        return self._tiles.get((x + min_x, y + min_y))

    # ------------------------------------------------------------------------------------------------------------------
    def corners(self) -> List[Tile]:
        """
        Returns the top left, top right, bottom right, and bottom left tiles.
        """
        min_x, min_y = self.min
        max_x, max_y = self.max

        corners = []
        for key in [(min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)]:
            tile = self._tiles.get(key)
            if tile is None:
                raise AssemblyError(f'No tile at corner {key}.')
            corners.append(tile)

        return corners

    # ------------------------------------------------------------------------------------------------------------------
    def rotate_once_clockwise(self) -> None:
        """
        Rotates the whole grid, and each tile in it, a quarter turn clockwise. The top left tile moves to (0, 0).
        """
        min_x, min_y = self.min
        last_row = self.tiles_high - 1

        tiles = {}
        for (x, y), tile in self._tiles.items():
            tile.rotate_once_clockwise()
            tiles[(last_row - (y - min_y), x - min_x)] = tile

        self._tiles = tiles
        self._update_bounds()

    # ------------------------------------------------------------------------------------------------------------------
    def flip_x(self) -> None:
        """
        Mirrors the whole grid, and each tile in it, along the x-axis.
        """
        min_x, _ = self.min
        max_x, _ = self.max

        tiles = {}
        for (x, y), tile in self._tiles.items():
            tile.flip_x()
            tiles[(min_x + max_x - x, y)] = tile

        self._tiles = tiles
        self._update_bounds()

    # ------------------------------------------------------------------------------------------------------------------
    def flip_y(self) -> None:
        """
        Mirrors the whole grid, and each tile in it, along the y-axis.
        """
        _, min_y = self.min
        _, max_y = self.max

        tiles = {}
        for (x, y), tile in self._tiles.items():
            tile.flip_y()
            tiles[(x, min_y + max_y - y)] = tile

        self._tiles = tiles
        self._update_bounds()

    # ------------------------------------------------------------------------------------------------------------------
    def _update_bounds(self) -> None:
        """
        Updates the smallest and largest grid coordinates after the tiles have been moved.
        """
        self._min = min(x for x, _ in self._tiles), min(y for _, y in self._tiles)
        self._max = max(x for x, _ in self._tiles), max(y for _, y in self._tiles)

# ----------------------------------------------------------------------------------------------------------------------
