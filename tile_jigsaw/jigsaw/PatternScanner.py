from typing import List, Tuple

import numpy as np

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.CompositeImage import CompositeImage
from tile_jigsaw.jigsaw.Pattern import Pattern


class PatternScanner:
    """
    Class for finding a motif in a composite image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, pattern: Pattern):
        """
        Object constructor.

        :param io: The Output decorator.
        :param pattern: The motif.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._pattern: Pattern = pattern
        """
        The motif.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def find(self, image: CompositeImage) -> List[Tuple[int, int]]:
        """
        Returns the top left corners of all occurrences of the motif in the current orientation of an image.

        :param image: The composite image.
        """
        return self.find_in_array(image.to_array())

    # ------------------------------------------------------------------------------------------------------------------
    def find_in_array(self, pixels: np.ndarray) -> List[Tuple[int, int]]:
        """
        Returns the top left corners of all occurrences of the motif in an array of pixels.

        :param pixels: The pixels indexed by row and column.
        """
        height, width = pixels.shape
        if self._pattern.width > width or self._pattern.height > height:
            return []

        rows = height - self._pattern.height + 1
        columns = width - self._pattern.width + 1

        hits = np.ones((rows, columns), dtype=bool)
        for dx, dy in self._pattern.offsets:
            hits &= pixels[dy:dy + rows, dx:dx + columns]

        ys, xs = np.nonzero(hits)

        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    # ------------------------------------------------------------------------------------------------------------------
    def scan_rotations(self, image: CompositeImage) -> Tuple[List[Tuple[int, int]], int]:
        """
        Searches the motif in the current orientation of an image and up to three quarter turns of the image. Returns
        the occurrences and the number of quarter turns applied. The image is left in the orientation in which the
        motif was found, or in its original orientation if the motif was not found.

        :param image: The composite image.
        """
        for rotations in range(4):
            matches = self.find(image)
            self._io.log_verbose(f'Found {len(matches)} occurrence(s) after {rotations} quarter turn(s).')
            if matches:
                return matches, rotations

            image.rotate_once_clockwise()

        return [], 0

    # ------------------------------------------------------------------------------------------------------------------
    def roughness(self, image: CompositeImage, matches: List[Tuple[int, int]]) -> int:
        """
        Returns the number of active pixels of an image minus the cells of all occurrences of the motif.

        :param image: The composite image.
        :param matches: The occurrences of the motif.
        """
        return image.count_active() - len(matches) * self._pattern.cell_count

    # ------------------------------------------------------------------------------------------------------------------
    def mask(self, shape: Tuple[int, int], matches: List[Tuple[int, int]]) -> np.ndarray:
        """
        Returns a boolean array marking the cells of all occurrences of the motif.

        :param shape: The shape of the image (rows and columns).
        :param matches: The occurrences of the motif.
        """
        mask = np.zeros(shape, dtype=bool)
        for x, y in matches:
            for dx, dy in self._pattern.offsets:
                mask[y + dy, x + dx] = True

        return mask

# ----------------------------------------------------------------------------------------------------------------------
