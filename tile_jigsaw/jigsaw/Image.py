from pathlib import Path
from typing import Any

import cv2
import numpy as np

from tile_jigsaw.jigsaw.JigsawError import JigsawError


class Image:
    """
    Class for rendering composite images.
    """
    BACKGROUND = (96, 48, 0)
    """
    The color of inactive pixels (BGR).
    """

    ACTIVE = (224, 160, 64)
    """
    The color of active pixels (BGR).
    """

    HIGHLIGHT = (0, 200, 255)
    """
    The color of active pixels belonging to a motif (BGR).
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, data: np.ndarray):
        """
        Object constructor.

        :param data: The image.
        """
        self._data: np.ndarray = data

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def render(pixels: np.ndarray, highlight: np.ndarray | None = None, scale: int = 1):
        """
        Renders binary pixels as a color image.

        :param pixels: The pixels indexed by row and column.
        :param highlight: The pixels to highlight.
        :param scale: The number of image pixels per side of a pixel.
        """
        data = np.full((*pixels.shape, 3), Image.BACKGROUND, np.uint8)
        data[pixels] = Image.ACTIVE
        if highlight is not None:
            data[pixels & highlight] = Image.HIGHLIGHT

        if scale > 1:
            height, width = pixels.shape
            data = cv2.resize(data, (width * scale, height * scale), interpolation=cv2.INTER_NEAREST)

        return Image(data)

    # ------------------------------------------------------------------------------------------------------------------
    def write(self, path: Path, params: Any = None) -> None:
        """
        Writes the image to the given path.

        :param path: The path.
        :param params: The parameters for the image encoder.
        """
        try:
            if params is None:
                written = cv2.imwrite(str(path), self._data)
            else:
                written = cv2.imwrite(str(path), self._data, params)
        except cv2.error as error:
            raise JigsawError(f"Unable to save image as '{path}'.") from error

        if not written:
            raise JigsawError(f"Unable to save image as '{path}'.")

# ----------------------------------------------------------------------------------------------------------------------
