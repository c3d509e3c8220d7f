from .rendering import PointPositioner, row_position

__all__ = [
    "PointPositioner",
    "row_position",
]
