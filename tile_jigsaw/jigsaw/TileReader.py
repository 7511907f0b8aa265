from typing import List

from tile_jigsaw.jigsaw.ParseError import ParseError
from tile_jigsaw.jigsaw.Tile import Tile


class TileReader:
    """
    Class for reading all tiles from a document.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def split_blocks(text: str) -> List[str]:
        """
        Splits a document into blocks separated by blank lines.

        :param text: The document.
        """
        blocks = []
        lines = []
        for line in text.splitlines():
            line = line.strip()
            if line:
                lines.append(line)
            elif lines:
                blocks.append('\n'.join(lines))
                lines = []

        if lines:
            blocks.append('\n'.join(lines))

        return blocks

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def read(text: str) -> List[Tile]:
        """
        Returns the tiles in a document.

        :param text: The document.
        """
        tiles = [Tile.parse(block) for block in TileReader.split_blocks(text)]
        if not tiles:
            raise ParseError('The document holds no tiles.')

        return tiles

# ----------------------------------------------------------------------------------------------------------------------
