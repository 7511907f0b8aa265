from tile_jigsaw.jigsaw.JigsawError import JigsawError


class ParseError(JigsawError):
    """
    Exception for malformed tile blocks and patterns.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
