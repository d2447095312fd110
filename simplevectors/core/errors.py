"""Exceptions raised by vector operations."""


class SimpleVectorsError(Exception):
    """Base class for all simplevectors errors."""


class OutOfRangeError(SimpleVectorsError, IndexError):
    """Raised by checked component access when the index is outside the vector."""

    def __init__(self, index: int, dimensions: int) -> None:
        self.index = index
        self.dimensions = dimensions
        super().__init__(
            f"index {index} is out of range for a vector with {dimensions} dimensions"
        )


class DimensionMismatchError(SimpleVectorsError, TypeError):
    """Raised when two vector operands differ in dimension or dtype."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"incompatible vector operands: {left} and {right}")
