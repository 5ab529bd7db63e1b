"""Exceptions raised by the gallery engine."""


class OutOfRangeError(IndexError):
    """A slide index outside ``[0, length)`` was requested.

    Signals an index bookkeeping bug in the caller; the engine never clamps.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Slide index {index} out of range for {length} image(s)")
        self.index: int = index
        self.length: int = length
