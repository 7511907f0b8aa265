from tile_jigsaw.jigsaw.JigsawError import JigsawError


class NoPatternFound(JigsawError):
    """
    Exception for composite images without a recognizable pattern in any orientation.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
