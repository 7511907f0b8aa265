import numpy as np

from tile_jigsaw.jigsaw.AssemblyError import AssemblyError
from tile_jigsaw.jigsaw.Grid import Grid


class CompositeImage:
    """
    The image formed by the tiles of a grid with their borders stripped.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, grid: Grid):
        """
        Object constructor.

        :param grid: The assembled grid.
        """
        sizes = {(tile.width, tile.height) for tile in grid.tiles.values()}
        if len(sizes) != 1:
            raise AssemblyError(f'The tiles in the grid have different sizes: {sorted(sizes)}.')

        width, height = sizes.pop()
        if width < 3 or height < 3:
            raise AssemblyError(f'Tiles of {width}x{height} pixels have no pixels inside their borders.')

        self._grid: Grid = grid
        """
        The assembled grid.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def grid(self) -> Grid:
        """
        Returns the grid underlying this image.
        """
        return self._grid

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tile_width(self) -> int:
        """
        Returns the width of a tile with its border stripped.
        """
        return next(iter(self._grid.tiles.values())).width - 2

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def tile_height(self) -> int:
        """
        Returns the height of a tile with its border stripped.
        """
        return next(iter(self._grid.tiles.values())).height - 2

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        """
        Returns the width of this image.
        """
        return self._grid.tiles_wide * self.tile_width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        """
        Returns the height of this image.
        """
        return self._grid.tiles_high * self.tile_height

    # ------------------------------------------------------------------------------------------------------------------
    def get_pixel(self, x: int, y: int) -> bool | None:
        """
        Returns whether a pixel of this image is active. Returns None if the pixel is outside this image.

        :param x: The x-coordinate of the pixel.
        :param y: The y-coordinate of the pixel.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None

        tile_width = self.tile_width
        tile_height = self.tile_height
        tile = self._grid.tile_at(x // tile_width, y // tile_height)
        if tile is None:
            return None

        return tile.interior_pixel(x % tile_width, y % tile_height)

    # ------------------------------------------------------------------------------------------------------------------
    def to_array(self) -> np.ndarray:
        """
        Returns the pixels of this image as a boolean array indexed by row and column.
        """
        tile_width = self.tile_width
        tile_height = self.tile_height
        min_x, min_y = self._grid.min

        pixels = np.zeros((self.height, self.width), dtype=bool)
        for (x, y), tile in self._grid.tiles.items():
            offset_x = (x - min_x) * tile_width - 1
            offset_y = (y - min_y) * tile_height - 1
            for cell_x, cell_y in tile.cells:
                if tile.is_interior(cell_x, cell_y):
                    pixels[offset_y + cell_y, offset_x + cell_x] = True

        return pixels

    # ------------------------------------------------------------------------------------------------------------------
    def count_active(self) -> int:
        """
        Returns the number of active pixels in this image.
        """
        return int(np.count_nonzero(self.to_array()))

    # ------------------------------------------------------------------------------------------------------------------
    def rotate_once_clockwise(self) -> None:
        """
        Rotates this image a quarter turn clockwise.
        """
        self._grid.rotate_once_clockwise()

    # ------------------------------------------------------------------------------------------------------------------
    def flip_x(self) -> None:
        """
        Mirrors this image along the x-axis.
        """
        self._grid.flip_x()

    # ------------------------------------------------------------------------------------------------------------------
    def flip_y(self) -> None:
        """
        Mirrors this image along the y-axis.
        """
        self._grid.flip_y()

# ----------------------------------------------------------------------------------------------------------------------
