"""Multi-line composition protocol.

Indicators whose rows carry several values (Bollinger Bands: top, middle,
bottom) describe their row layout through ``MultiLineDescriptor``. The
rendering side relies only on this protocol, so indicator variants share
line handling without a common base class.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from config.schema import LineStyle
from domain.indicators.base import IndicatorOutput, IndicatorRow


@dataclass(frozen=True)
class LineDescriptor:
    """Name and resolved style of one output line."""
    name: str
    style: LineStyle


@runtime_checkable
class MultiLineDescriptor(Protocol):
    """Row layout and line metadata of a multi-line indicator."""

    # Ordered field names of a row's value vector
    point_array_map: tuple[str, ...]
    # Field used by single-value consumers (tooltips, queries)
    point_val_key: str
    # Option names of the lines drawn besides the primary one
    lines_api_names: tuple[str, ...]
    # Lines bounding the shaded area
    area_lines_names: tuple[str, ...]

    def line_descriptors(self, series_color: str | None = None) -> list[LineDescriptor]:
        ...


def field_position(descriptor: MultiLineDescriptor, name: str) -> int:
    """Position of a named field in the value vector."""
    try:
        return descriptor.point_array_map.index(name)
    except ValueError:
        raise KeyError(f"Unknown line {name!r}, expected one of {descriptor.point_array_map}") from None


def primary_value(descriptor: MultiLineDescriptor, row: IndicatorRow) -> float:
    """Primary value of a full row (x first)."""
    return row[1 + field_position(descriptor, descriptor.point_val_key)]


def row_as_dict(descriptor: MultiLineDescriptor, row: IndicatorRow) -> dict[str, float]:
    """Map a full row onto its field names, with ``x`` first."""
    point = {"x": row[0]}
    point.update(zip(descriptor.point_array_map, row[1:]))
    return point


def translated_lines_names(descriptor: MultiLineDescriptor) -> list[str]:
    """Fields drawn as extra lines, i.e. every field except the primary."""
    return [name for name in descriptor.point_array_map if name != descriptor.point_val_key]


def split_lines(
    descriptor: MultiLineDescriptor,
    output: IndicatorOutput,
) -> dict[str, list[tuple[float, float]]]:
    """
    Split an output into one (x, y) series per line.

    Example:
        >>> lines = split_lines(BollingerBandsComputer(), output)
        >>> sorted(lines)
        ['bottom', 'middle', 'top']
    """
    return {
        name: output.line(position)
        for position, name in enumerate(descriptor.point_array_map)
    }
