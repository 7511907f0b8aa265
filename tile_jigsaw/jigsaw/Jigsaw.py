import math
from typing import List, Tuple

import cv2

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.AssemblyError import AssemblyError
from tile_jigsaw.jigsaw.CompositeImage import CompositeImage
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.CornerFinder import CornerFinder
from tile_jigsaw.jigsaw.GridAssembler import GridAssembler
from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.JigsawResult import JigsawResult
from tile_jigsaw.jigsaw.NoPatternFound import NoPatternFound
from tile_jigsaw.jigsaw.Pattern import Pattern, SEA_MONSTER
from tile_jigsaw.jigsaw.PatternScanner import PatternScanner
from tile_jigsaw.jigsaw.Tile import Tile
from tile_jigsaw.jigsaw.TileReader import TileReader


class Jigsaw:
    """
    Class for reassembling a tile jigsaw and searching for motifs in the reassembled image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, config: Config):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def solve(self) -> JigsawResult:
        """
        Reads the tiles from the input file, reassembles the jigsaw, and searches for the motif.
        """
        return self.solve_text(self._read_input())

    # ------------------------------------------------------------------------------------------------------------------
    def solve_text(self, text: str) -> JigsawResult:
        """
        Reassembles the jigsaw described by a document and searches for the motif.

        :param text: The document with the tiles.
        """
        self._io.title('Assembling Tiles')
        tiles = TileReader.read(text)
        self._io.log_notice(f'Read {len(tiles)} tiles.')

        grid = GridAssembler(self._io, tiles).assemble()
        corners = grid.corners()
        self._io.log_notice(f'Assembled a grid of {grid.tiles_wide}x{grid.tiles_high} tiles with corner tiles '
                            f'{", ".join(str(tile.id) for tile in corners)}.')

        self._io.text('')
        self._io.title('Searching Pattern')
        image = CompositeImage(grid)
        scanner = PatternScanner(self._io, self._read_pattern())
        matches, rotations, flip_x, flip_y = self._find_pattern(scanner, image)
        roughness = scanner.roughness(image, matches)
        self._io.log_notice(f'Found {len(matches)} occurrence(s) of the pattern in an image of '
                            f'{image.width}x{image.height} pixels.')

        if self._config.image_path is not None:
            self._save_image(scanner, image, matches)

        return JigsawResult(corner_product=math.prod(tile.id for tile in corners),
                            roughness=roughness,
                            monsters=len(matches),
                            rotations=rotations,
                            flip_x=flip_x,
                            flip_y=flip_y)

    # ------------------------------------------------------------------------------------------------------------------
    def find_corners(self) -> List[Tile]:
        """
        Reads the tiles from the input file and returns the corner tiles without reassembling the jigsaw.
        """
        tiles = TileReader.read(self._read_input())
        self._io.log_notice(f'Read {len(tiles)} tiles.')

        corners = CornerFinder(self._io, tiles).find_corners()
        if len(corners) != 4:
            raise AssemblyError(f'Found {len(corners)} corner tile(s), expected 4.')

        return corners

    # ------------------------------------------------------------------------------------------------------------------
    def _find_pattern(self,
                      scanner: PatternScanner,
                      image: CompositeImage) -> Tuple[List[Tuple[int, int]], int, bool, bool]:
        """
        Searches the motif in all orientations of the image. Returns the occurrences, the number of quarter turns, and
        whether the image was mirrored along the x-axis or y-axis.

        :param scanner: The pattern scanner.
        :param image: The composite image.
        """
        matches, rotations = scanner.scan_rotations(image)
        if matches:
            return matches, rotations, False, False

        self._io.log_verbose('Mirroring the image along the x-axis.')
        image.flip_x()
        matches, rotations = scanner.scan_rotations(image)
        if matches:
            return matches, rotations, True, False

        self._io.log_verbose('Mirroring the image along the y-axis.')
        image.flip_x()
        image.flip_y()
        matches, rotations = scanner.scan_rotations(image)
        if matches:
            return matches, rotations, False, True

        raise NoPatternFound('No recognizable pattern in this image.')

    # ------------------------------------------------------------------------------------------------------------------
    def _read_input(self) -> str:
        """
        Returns the content of the input file.
        """
        self._io.log_verbose(f'Reading tiles from <fso>{self._config.input_path}</fso>.')

        return self._config.input_path.read_text()

    # ------------------------------------------------------------------------------------------------------------------
    def _read_pattern(self) -> Pattern:
        """
        Returns the motif to search for.
        """
        if self._config.pattern_path is None:
            return SEA_MONSTER

        self._io.log_verbose(f'Reading pattern from <fso>{self._config.pattern_path}</fso>.')

        return Pattern.read(self._config.pattern_path)

    # ------------------------------------------------------------------------------------------------------------------
    def _save_image(self, scanner: PatternScanner, image: CompositeImage, matches: List[Tuple[int, int]]) -> None:
        """
        Saves the composite image with the occurrences of the motif highlighted.

        :param scanner: The pattern scanner.
        :param image: The composite image.
        :param matches: The occurrences of the motif.
        """
        pixels = image.to_array()
        rendered = Image.render(pixels, scanner.mask(pixels.shape, matches), self._config.scale)
        rendered.write(self._config.image_path, [cv2.IMWRITE_PNG_COMPRESSION, 9])

        self._io.text(f'Saved composite image as <fso>{self._config.image_path}</fso>.')

# ----------------------------------------------------------------------------------------------------------------------
