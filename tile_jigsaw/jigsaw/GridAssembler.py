from collections import deque
from typing import Deque, Dict, List, Tuple

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Alignment import Alignment
from tile_jigsaw.jigsaw.AlignmentResolver import AlignmentResolver
from tile_jigsaw.jigsaw.AssemblyError import AssemblyError
from tile_jigsaw.jigsaw.Edge import Edge
from tile_jigsaw.jigsaw.Grid import Grid
from tile_jigsaw.jigsaw.Tile import Tile


class GridAssembler:
    """
    Class for assembling tiles into a grid.

    Tiles are placed greedily: a placed tile is never moved again. This only works for tile sets with a unique
    tiling.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, tiles: List[Tile]):
        """
        Object constructor.

        :param io: The Output decorator.
        :param tiles: The tiles to assemble. The assembler takes ownership of the tiles.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._work_queue: Deque[Tile] = deque(tiles)
        """
        The tiles not yet placed.
        """

        self._grid: Dict[Tuple[int, int], Tile] = {}
        """
        The placed tiles indexed by their grid coordinates.
        """

        self._edges: Dict[Tuple[int, int], List[Edge]] = {}
        """
        The edges of the placed tiles indexed by their grid coordinates.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def assemble(self) -> Grid:
        """
        Assembles the tiles into a rectangular grid.
        """
        if not self._work_queue:
            raise AssemblyError('Unable to assemble a grid without tiles.')

        self._place(self._work_queue.popleft(), (0, 0))

        iteration = 0
        while self._work_queue:
            iteration += 1
            placed = self._assemble_pass()
            self._io.log_verbose(f'Pass {iteration}: placed {placed} tile(s), {len(self._work_queue)} remaining.')

            if placed == 0:
                ids = ', '.join(str(tile.id) for tile in self._work_queue)
                raise AssemblyError(f'Unable to place tile(s) {ids}.')

        grid = Grid(self._grid)
        if not grid.is_rectangular():
            raise AssemblyError(f'The {len(grid.tiles)} placed tiles do not form a rectangle of '
                                f'{grid.tiles_wide}x{grid.tiles_high} tiles.')

        return grid

    # ------------------------------------------------------------------------------------------------------------------
    def _assemble_pass(self) -> int:
        """
        Tries to place each tile in the work queue once. Returns the number of placed tiles.
        """
        placed = 0
        for _ in range(len(self._work_queue)):
            tile = self._work_queue.popleft()
            match = self._find_alignment(tile)
            if match is None:
                self._work_queue.append(tile)
                continue

            (x, y), alignment = match
            tile.rotate_clockwise(alignment.rotations_clockwise)
            if alignment.flip_x:
                tile.flip_x()
            if alignment.flip_y:
                tile.flip_y()

            offset_x, offset_y = alignment.location.offset()
            self._place(tile, (x + offset_x, y + offset_y))
            placed += 1

        return placed

    # ------------------------------------------------------------------------------------------------------------------
    def _find_alignment(self, tile: Tile) -> Tuple[Tuple[int, int], Alignment] | None:
        """
        Returns the grid coordinates of the first placed tile the tile attaches to and the alignment.

        :param tile: The tile.
        """
        edges = tile.edges()
        for key, placed_edges in self._edges.items():
            alignment = AlignmentResolver.align(placed_edges, edges)
            if alignment is not None:
                return key, alignment

        return None

    # ------------------------------------------------------------------------------------------------------------------
    def _place(self, tile: Tile, key: Tuple[int, int]) -> None:
        """
        Places a tile in the grid.

        :param tile: The tile.
        :param key: The grid coordinates.
        """
        if key in self._grid:
            raise AssemblyError(f'Unable to place tile {tile.id} at {key}, already occupied by tile '
                                f'{self._grid[key].id}.')

        self._io.log_very_verbose(f'Placing tile {tile.id} at {key}.')
        self._grid[key] = tile
        self._edges[key] = tile.edges()

# ----------------------------------------------------------------------------------------------------------------------
