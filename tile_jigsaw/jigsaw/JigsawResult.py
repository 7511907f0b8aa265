from dataclasses import dataclass


@dataclass(frozen=True)
class JigsawResult:
    """
    The answers of a reassembled tile jigsaw.
    """

    # ------------------------------------------------------------------------------------------------------------------
    corner_product: int
    """
    The product of the IDs of the four corner tiles.
    """

    roughness: int
    """
    The number of active pixels in the composite image not part of a motif.
    """

    monsters: int
    """
    The number of occurrences of the motif.
    """

    rotations: int
    """
    The number of quarter turns of the composite image in which the motif was found.
    """

    flip_x: bool
    """
    Whether the composite image was mirrored along the x-axis before rotating.
    """

    flip_y: bool
    """
    Whether the composite image was mirrored along the y-axis before rotating.
    """

# ----------------------------------------------------------------------------------------------------------------------
