import re
from typing import List, Set, Tuple

from tile_jigsaw.jigsaw.Edge import Edge
from tile_jigsaw.jigsaw.ParseError import ParseError


class Tile:
    """
    A labeled tile of binary pixels.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, tile_id: int, width: int, height: int, cells: Set[Tuple[int, int]]):
        """
        Object constructor.

        :param tile_id: The ID of the tile.
        :param width: The width of the tile.
        :param height: The height of the tile.
        :param cells: The coordinates of the active pixels.
        """
        self._id: int = tile_id
        """
        The ID of the tile.
        """

        self._width: int = width
        """
        The width of the tile.
        """

        self._height: int = height
        """
        The height of the tile.
        """

        self._cells: Set[Tuple[int, int]] = cells
        """
        The coordinates of the active pixels.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def id(self) -> int:
        """
        Returns the ID of this tile.
        """
        return self._id

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        """
        Returns the width of this tile.
        """
        return self._width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        """
        Returns the height of this tile.
        """
        return self._height

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def cells(self) -> Set[Tuple[int, int]]:
        """
        Returns a copy of the coordinates of the active pixels of this tile.
        """
        return set(self._cells)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def parse(block: str):
        """
        Parses a tile from a block of text, i.e. a line 'Tile <id>:' followed by rows of '#' and '.'.

        :param block: The block of text.
        """
        lines = [line.strip() for line in block.strip().splitlines()]
        if not lines or not lines[0]:
            raise ParseError('Found an empty tile block.')

        parts = re.fullmatch(r'Tile (?P<id>\d+):', lines[0])
        if parts is None:
            raise ParseError(f"Malformed tile header '{lines[0]}'.")
        tile_id = int(parts.group('id'))

        rows = lines[1:]
        if not rows:
            raise ParseError(f'Tile {tile_id} has no pixels.')

        width = len(rows[0])
        cells = set()
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ParseError(f'Row {y} of tile {tile_id} has width {len(row)}, expected {width}.')
            for x, char in enumerate(row):
                if char == '#':
                    cells.add((x, y))
                elif char != '.':
                    raise ParseError(f"Unexpected character '{char}' at ({x}, {y}) in tile {tile_id}.")

        if width == 0:
            raise ParseError(f'Tile {tile_id} has no pixels.')

        return Tile(tile_id, width, len(rows), cells)

    # ------------------------------------------------------------------------------------------------------------------
    def is_active(self, x: int, y: int) -> bool:
        """
        Returns whether a pixel of this tile is active.

        :param x: The x-coordinate of the pixel.
        :param y: The y-coordinate of the pixel.
        """
        return (x, y) in self._cells

    # ------------------------------------------------------------------------------------------------------------------
    def edges(self) -> List[Edge]:
        """
        Returns the top, right, bottom, and left edges of this tile, each read clockwise.
        """
        top = [self.is_active(x, 0) for x in range(self._width)]
        right = [self.is_active(self._width - 1, y) for y in range(self._height)]
        bottom = [self.is_active(x, self._height - 1) for x in reversed(range(self._width))]
        left = [self.is_active(0, y) for y in reversed(range(self._height))]

        return [Edge(tuple(top)), Edge(tuple(right)), Edge(tuple(bottom)), Edge(tuple(left))]

    # ------------------------------------------------------------------------------------------------------------------
    def rotate_once_clockwise(self) -> None:
        """
        Rotates this tile a quarter turn clockwise.
        """
        last_y = self._height - 1
        self._cells = {(last_y - y, x) for x, y in self._cells}
        self._width, self._height = self._height, self._width

    # ------------------------------------------------------------------------------------------------------------------
    def rotate_clockwise(self, n: int) -> None:
        """
        Rotates this tile n quarter turns clockwise.

        :param n: The number of quarter turns.
        """
        for _ in range(n % 4):
            self.rotate_once_clockwise()

    # ------------------------------------------------------------------------------------------------------------------
    def flip_x(self) -> None:
        """
        Mirrors this tile along the x-axis, i.e. swaps its left and right sides.
        """
        last_x = self._width - 1
        self._cells = {(last_x - x, y) for x, y in self._cells}

    # ------------------------------------------------------------------------------------------------------------------
    def flip_y(self) -> None:
        """
        Mirrors this tile along the y-axis, i.e. swaps its top and bottom sides.
        """
        last_y = self._height - 1
        self._cells = {(x, last_y - y) for x, y in self._cells}

    # ------------------------------------------------------------------------------------------------------------------
    def is_interior(self, x: int, y: int) -> bool:
        """
        Returns whether a pixel lies strictly inside the border of this tile.

        :param x: The x-coordinate of the pixel.
        :param y: The y-coordinate of the pixel.
        """
        return 0 < x < self._width - 1 and 0 < y < self._height - 1

    # ------------------------------------------------------------------------------------------------------------------
    def interior_pixel(self, x: int, y: int) -> bool | None:
        """
        Returns whether a pixel of this tile with its border stripped is active. Returns None if the pixel is outside
        the stripped tile.

        :param x: The x-coordinate of the pixel in the stripped tile.
        :param y: The y-coordinate of the pixel in the stripped tile.
        """
        x += 1
        y += 1
        if not self.is_interior(x, y):
            return None

        return self.is_active(x, y)

    # ------------------------------------------------------------------------------------------------------------------
    def __repr__(self) -> str:
        return f'Tile(id={self._id}, width={self._width}, height={self._height})'

# ----------------------------------------------------------------------------------------------------------------------
