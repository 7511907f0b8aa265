import math
import unittest
from pathlib import Path

from cleo.io.inputs.string_input import StringInput
from cleo.io.outputs.buffered_output import BufferedOutput
from cleo.io.outputs.output import Verbosity

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.AssemblyError import AssemblyError
from tile_jigsaw.jigsaw.GridAssembler import GridAssembler
from tile_jigsaw.jigsaw.Tile import Tile
from tile_jigsaw.jigsaw.TileReader import TileReader


class GridAssemblerTest(unittest.TestCase):
    """
    Unit test for assembling tiles into a grid.
    """
    tile_a = 'Tile 1:\n......\n#....#\n#.....\n#.....\n#.....\n...##.'
    """
    A tile whose right side touches tile B and whose bottom side touches tile C.
    """

    tile_b = 'Tile 2:\n.#.#..\n#....#\n.....#\n.....#\n......\n...#..'
    """
    A tile whose left side touches tile A.
    """

    tile_c = 'Tile 3:\n...##.\n.....#\n#....#\n#.....\n.....#\n.#..#.'
    """
    A tile whose top side touches tile A.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def setUp(self):
        self.output = BufferedOutput(verbosity=Verbosity.VERBOSE)
        self.io = TileJigsawIO(StringInput(''), self.output, BufferedOutput())
        self.tiles = TileReader.read((Path(__file__).parent / 'data' / 'example.txt').read_text())

    # ------------------------------------------------------------------------------------------------------------------
    def test_assemble(self):
        """
        Test assembling the example into a 3x3 grid.
        """
        grid = GridAssembler(self.io, self.tiles).assemble()

        self.assertEqual(9, len(grid.tiles))
        self.assertEqual(3, grid.tiles_wide)
        self.assertEqual(3, grid.tiles_high)
        self.assertTrue(grid.is_rectangular())
        self.assertEqual({tile.id for tile in self.tiles}, {tile.id for tile in grid.tiles.values()})

        min_x, min_y = grid.min
        keys = {(x + min_x, y + min_y) for x in range(3) for y in range(3)}
        self.assertEqual(keys, set(grid.tiles))

        self.assertIn('Pass 1', self.output.fetch())

    # ------------------------------------------------------------------------------------------------------------------
    def test_neighbours_touch(self):
        """
        Test adjacent tiles in the assembled grid have matching edges.
        """
        grid = GridAssembler(self.io, self.tiles).assemble()

        for (x, y), tile in grid.tiles.items():
            right = grid.tiles.get((x + 1, y))
            if right is not None:
                self.assertTrue(tile.edges()[1].eq_reverse(right.edges()[3]))
            below = grid.tiles.get((x, y + 1))
            if below is not None:
                self.assertTrue(tile.edges()[2].eq_reverse(below.edges()[0]))

    # ------------------------------------------------------------------------------------------------------------------
    def test_corners(self):
        """
        Test the corner tiles of the assembled grid.
        """
        grid = GridAssembler(self.io, self.tiles).assemble()
        corners = grid.corners()

        self.assertEqual({1951, 3079, 2971, 1171}, {tile.id for tile in corners})
        self.assertEqual(20899048083289, math.prod(tile.id for tile in corners))

    # ------------------------------------------------------------------------------------------------------------------
    def test_deterministic(self):
        """
        Test assembling the same tiles twice gives the same grid.
        """
        grid1 = GridAssembler(self.io, self.tiles).assemble()
        tiles = TileReader.read((Path(__file__).parent / 'data' / 'example.txt').read_text())
        grid2 = GridAssembler(self.io, tiles).assemble()

        self.assertEqual({key: tile.id for key, tile in grid1.tiles.items()},
                         {key: tile.id for key, tile in grid2.tiles.items()})
        self.assertEqual({key: tile.cells for key, tile in grid1.tiles.items()},
                         {key: tile.cells for key, tile in grid2.tiles.items()})

    # ------------------------------------------------------------------------------------------------------------------
    def test_single_tile(self):
        """
        Test a single tile is all four corners.
        """
        grid = GridAssembler(self.io, self.tiles[:1]).assemble()
        corners = grid.corners()

        self.assertEqual([(0, 0)], list(grid.tiles))
        self.assertEqual(2311 ** 4, math.prod(tile.id for tile in corners))

    # ------------------------------------------------------------------------------------------------------------------
    def test_no_progress(self):
        """
        Test tiles that do not touch.
        """
        tiles = [Tile.parse('Tile 1:\n###\n#.#\n###'), Tile.parse('Tile 2:\n#..\n...\n...')]

        with self.assertRaises(AssemblyError):
            GridAssembler(self.io, tiles).assemble()

    # ------------------------------------------------------------------------------------------------------------------
    def test_not_rectangular(self):
        """
        Test tiles that attach to each other but form an L-shape.
        """
        tiles = [Tile.parse(self.tile_a), Tile.parse(self.tile_b), Tile.parse(self.tile_c)]

        with self.assertRaisesRegex(AssemblyError, 'rectangle'):
            GridAssembler(self.io, tiles).assemble()

    # ------------------------------------------------------------------------------------------------------------------
    def test_occupied(self):
        """
        Test two tiles that attach to the same side of a placed tile.
        """
        tiles = [Tile.parse(self.tile_a), Tile.parse(self.tile_b), Tile.parse(self.tile_b.replace('2', '4'))]

        with self.assertRaisesRegex(AssemblyError, 'occupied'):
            GridAssembler(self.io, tiles).assemble()

    # ------------------------------------------------------------------------------------------------------------------
    def test_no_tiles(self):
        """
        Test assembling without tiles.
        """
        with self.assertRaises(AssemblyError):
            GridAssembler(self.io, []).assemble()


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
