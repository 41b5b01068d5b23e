"""Custom exception types to more accurately represent difficulties"""

__all__ = ["DimensionMismatchError", "DimensionalityError", "NpointException"]


class NpointException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(NpointException, ValueError):
    """Error subtype for when one or more dimensions of an object are unexpected"""
    pass


class DimensionMismatchError(DimensionalityError):
    """Error subtype for when two points meet in an element-wise operation but differ in dimension"""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Dimension mismatch: {left} vs {right}")
