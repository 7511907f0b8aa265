from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument, option

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.Jigsaw import Jigsaw
from tile_jigsaw.jigsaw.JigsawError import JigsawError


class SolveCommand(Command):
    """
    The solve command.
    """
    name = 'solve'
    description = 'Reassembles a tile jigsaw and counts the pixels not part of a sea monster'
    options = [option(long_name='image',
                      short_name='i',
                      description='The path where to save the reassembled image.',
                      flag=False,
                      value_required=True),
               option(long_name='pattern',
                      short_name='p',
                      description='The path to a file with the pattern to search for (default: a sea monster).',
                      flag=False,
                      value_required=True),
               option(long_name='scale',
                      description='The number of image pixels per side of a pixel in the saved image.',
                      default=4,
                      flag=False)]
    arguments = [argument(name='input', description='The file with the tiles.', optional=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the solve command.
        """
        io = TileJigsawIO(self._io.input, self._io.output, self._io.error_output)
        config = self._create_config()

        jigsaw = Jigsaw(io, config)
        result = jigsaw.solve()

        io.text('')
        io.title('Result')
        io.text(f'Product of corner tile IDs: {result.corner_product}')
        io.text(f'Pixels not part of a pattern: {result.roughness}')

        return 0

    # ------------------------------------------------------------------------------------------------------------------
    def _create_config(self) -> Config:
        """
        Creates a Config object from the given option and arguments.
        """
        try:
            scale = int(self.option('scale'))
        except ValueError:
            raise JigsawError(f"Invalid scale: {self.option('scale')}")
        if scale < 1:
            raise JigsawError(f'Invalid scale: {scale}')

        image = self.option('image')
        if image and Path(image).suffix.lower() != '.png':
            raise JigsawError(f"Unable to save image as '{image}', only PNG images are supported.")
        pattern = self.option('pattern')

        return Config(input_path=Path(self.argument('input')),
                      image_path=Path(image) if image else None,
                      pattern_path=Path(pattern) if pattern else None,
                      scale=scale)

# ----------------------------------------------------------------------------------------------------------------------
