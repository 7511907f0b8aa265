import math
from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.Jigsaw import Jigsaw


class CornersCommand(Command):
    """
    The corners command.
    """
    name = 'corners'
    description = 'Finds the corner tiles of a tile jigsaw without reassembling it'
    arguments = [argument(name='input', description='The file with the tiles.', optional=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the corners command.
        """
        io = TileJigsawIO(self._io.input, self._io.output, self._io.error_output)
        config = Config(input_path=Path(self.argument('input')))

        jigsaw = Jigsaw(io, config)
        corners = jigsaw.find_corners()

        io.text('')
        io.title('Result')
        io.text(f'Corner tiles: {", ".join(str(tile.id) for tile in corners)}')
        io.text(f'Product of corner tile IDs: {math.prod(tile.id for tile in corners)}')

        return 0

# ----------------------------------------------------------------------------------------------------------------------
