class JigsawError(RuntimeError):
    """
    Exception for errors while reassembling a tile jigsaw.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
