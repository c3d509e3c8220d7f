"""
Rendering port.

The chart and annotation layers live outside this package. They read
indicator rows through the lookup below and never write into an
IndicatorOutput.
"""

from typing import Protocol, runtime_checkable

from domain.indicators.base import IndicatorOutput
from domain.indicators.lines import MultiLineDescriptor, field_position


@runtime_checkable
class PointPositioner(Protocol):
    """Maps data coordinates to pixel coordinates (implemented by the chart)."""

    def to_pixels(self, x: float, y: float) -> tuple[float, float]:
        """Translate one data point to (pixel_x, pixel_y)."""
        ...


def row_position(
    output: IndicatorOutput,
    index: int,
    positioner: PointPositioner,
    descriptor: MultiLineDescriptor | None = None,
    line: str | None = None,
) -> tuple[float, float]:
    """
    Pixel position of one output row.

    Args:
        output: Computed indicator output
        index: Row index, negative values count from the end
        positioner: Chart-side coordinate translation
        descriptor: Row layout; required when ``line`` is given
        line: Field to position, defaults to the primary value

    Returns:
        (pixel_x, pixel_y)

    Raises:
        IndexError: If the row does not exist
        ValueError: If ``line`` is given without a descriptor
    """
    row = output.point_at(index)

    if descriptor is None:
        if line is not None:
            raise ValueError("line lookup requires a descriptor")
        position = 0
    else:
        position = field_position(descriptor, line or descriptor.point_val_key)

    return positioner.to_pixels(row[0], row[1 + position])
