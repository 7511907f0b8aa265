import tempfile
import unittest
from pathlib import Path

from cleo.application import Application
from cleo.testers.command_tester import CommandTester

from tile_jigsaw.command.CornersCommand import CornersCommand
from tile_jigsaw.command.SolveCommand import SolveCommand
from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.ParseError import ParseError


class JigsawCommandTest(unittest.TestCase):
    """
    Unit test for the commands.
    """
    example_path = Path(__file__).parent / 'data' / 'example.txt'

    # ------------------------------------------------------------------------------------------------------------------
    def setUp(self):
        self.application = Application()
        self.application.add(CornersCommand())
        self.application.add(SolveCommand())

    # ------------------------------------------------------------------------------------------------------------------
    def test_solve(self):
        """
        Test the solve command.
        """
        command_tester = CommandTester(self.application.find('solve'))
        status = command_tester.execute(str(self.example_path))

        self.assertEqual(0, status)
        output = command_tester.io.fetch_output()
        self.assertIn('Product of corner tile IDs: 20899048083289', output)
        self.assertIn('Pixels not part of a pattern: 273', output)

    # ------------------------------------------------------------------------------------------------------------------
    def test_solve_with_image(self):
        """
        Test the solve command saving the reassembled image.
        """
        with tempfile.TemporaryDirectory() as tmp:
            image_path = Path(tmp) / 'image.png'

            command_tester = CommandTester(self.application.find('solve'))
            command_tester.execute(f'--image {image_path} --scale 1 {self.example_path}')

            self.assertTrue(image_path.exists())
            self.assertIn('Saved composite image as', command_tester.io.fetch_output())

    # ------------------------------------------------------------------------------------------------------------------
    def test_solve_invalid_scale(self):
        """
        Test the solve command with an invalid scale.
        """
        command_tester = CommandTester(self.application.find('solve'))

        with self.assertRaises(JigsawError):
            command_tester.execute(f'--scale 0 {self.example_path}')
        with self.assertRaises(JigsawError):
            command_tester.execute(f'--scale abc {self.example_path}')

    # ------------------------------------------------------------------------------------------------------------------
    def test_solve_image_not_png(self):
        """
        Test the solve command with an image path in a format other than PNG.
        """
        with tempfile.TemporaryDirectory() as tmp:
            image_path = Path(tmp) / 'image.txt'

            command_tester = CommandTester(self.application.find('solve'))
            with self.assertRaises(JigsawError):
                command_tester.execute(f'--image {image_path} {self.example_path}')

            self.assertFalse(image_path.exists())
            self.assertNotIn('Saved composite image as', command_tester.io.fetch_output())

    # ------------------------------------------------------------------------------------------------------------------
    def test_solve_malformed(self):
        """
        Test the solve command with a malformed document.
        """
        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp) / 'tiles.txt'
            input_path.write_text('Tile 1:\n#..\n.#\n')

            command_tester = CommandTester(self.application.find('solve'))
            with self.assertRaises(ParseError):
                command_tester.execute(str(input_path))

    # ------------------------------------------------------------------------------------------------------------------
    def test_corners(self):
        """
        Test the corners command.
        """
        command_tester = CommandTester(self.application.find('corners'))
        status = command_tester.execute(str(self.example_path))

        self.assertEqual(0, status)
        self.assertIn('Product of corner tile IDs: 20899048083289', command_tester.io.fetch_output())


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
