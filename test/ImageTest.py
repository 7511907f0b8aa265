import tempfile
import unittest
from pathlib import Path

import cv2
import numpy as np

from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.JigsawError import JigsawError


class ImageTest(unittest.TestCase):
    """
    Unit test for rendering and saving images.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp.name)
        self.pixels = np.array([[True, False], [False, True]])

    # ------------------------------------------------------------------------------------------------------------------
    def tearDown(self):
        self.tmp.cleanup()

    # ------------------------------------------------------------------------------------------------------------------
    def test_render_and_write(self):
        """
        Test rendering pixels with a highlighted pixel.
        """
        path = self.tmp_path / 'image.png'
        highlight = np.array([[False, False], [False, True]])

        Image.render(self.pixels, highlight, 3).write(path)

        data = cv2.imread(str(path))
        self.assertEqual((6, 6, 3), data.shape)
        self.assertEqual(Image.ACTIVE, tuple(int(value) for value in data[0, 0]))
        self.assertEqual(Image.BACKGROUND, tuple(int(value) for value in data[0, 5]))
        self.assertEqual(Image.HIGHLIGHT, tuple(int(value) for value in data[5, 5]))

    # ------------------------------------------------------------------------------------------------------------------
    def test_write_missing_folder(self):
        """
        Test saving an image in a folder that does not exist.
        """
        path = self.tmp_path / 'missing' / 'image.png'

        with self.assertRaises(JigsawError):
            Image.render(self.pixels).write(path)
        self.assertFalse(path.exists())

    # ------------------------------------------------------------------------------------------------------------------
    def test_write_unknown_format(self):
        """
        Test saving an image in a format without an encoder.
        """
        with self.assertRaises(JigsawError):
            Image.render(self.pixels).write(self.tmp_path / 'image.txt')


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
