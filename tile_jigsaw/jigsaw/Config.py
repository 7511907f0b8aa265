from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """
    The configuration of TileJigsaw.
    """
    input_path: Path
    """
    The path to the document with the tiles.
    """

    image_path: Path | None = None
    """
    The path to the rendered composite image, if any.
    """

    pattern_path: Path | None = None
    """
    The path to a file with a custom motif. If None, the sea monster is used.
    """

    scale: int = 4
    """
    The number of image pixels per side of a pixel in the rendered composite image.
    """

# ----------------------------------------------------------------------------------------------------------------------
