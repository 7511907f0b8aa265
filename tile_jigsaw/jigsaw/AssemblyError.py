from tile_jigsaw.jigsaw.JigsawError import JigsawError


class AssemblyError(JigsawError):
    """
    Exception for tile sets that can not be assembled into a rectangular grid.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
