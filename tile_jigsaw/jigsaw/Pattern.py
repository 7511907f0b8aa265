from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from tile_jigsaw.jigsaw.ParseError import ParseError


@dataclass(frozen=True)
class Pattern:
    """
    A motif to search for in a composite image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    offsets: Tuple[Tuple[int, int], ...]
    """
    The offsets of the active cells of the motif relative to its top left corner.
    """

    width: int
    """
    The width of the bounding box of the motif.
    """

    height: int
    """
    The height of the bounding box of the motif.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def cell_count(self) -> int:
        """
        Returns the number of active cells of the motif.
        """
        return len(self.offsets)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def parse(text: str):
        """
        Parses a motif drawn with '#' for active cells and any other character for inactive cells.

        :param text: The drawing of the motif.
        """
        lines = text.strip('\n').splitlines()
        offsets = tuple((x, y) for y, line in enumerate(lines) for x, char in enumerate(line) if char == '#')
        if not offsets:
            raise ParseError('The pattern has no active cells.')

        return Pattern(offsets=offsets,
                       width=max(len(line.rstrip()) for line in lines),
                       height=len(lines))

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def read(path: Path):
        """
        Reads a motif from a file.

        :param path: The path to the file.
        """
        return Pattern.parse(path.read_text())


# ----------------------------------------------------------------------------------------------------------------------
SEA_MONSTER = Pattern.parse('                  # \n'
                            '#    ##    ##    ###\n'
                            ' #  #  #  #  #  #   ')
"""
The sea monster.
"""

# ----------------------------------------------------------------------------------------------------------------------
