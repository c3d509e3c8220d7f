"""Base types for rolling-window indicators."""

from dataclasses import dataclass
from typing import Any, Sequence, Union

# WHY: Field order of an OHLC sample, matching chart point arrays
OPEN, HIGH, LOW, CLOSE = 0, 1, 2, 3
OHLC_FIELDS = ("open", "high", "low", "close")

Sample = Union[float, Sequence[float]]
IndicatorRow = tuple[float, ...]


class SeriesError(ValueError):
    """Source series violates its ordering or alignment invariants."""


def is_ohlc(sample: Any) -> bool:
    """Return True when a y sample is an OHLC tuple rather than a scalar."""
    return isinstance(sample, (list, tuple))


def select_value(sample: Sample, index: int) -> float:
    """Pick the configured OHLC field, or the scalar itself."""
    if is_ohlc(sample):
        return sample[index]
    return sample


@dataclass(frozen=True)
class SourceSeries:
    """Caller-owned time series an indicator is computed from.

    The sequences are held by reference. Callers must not mutate them
    while a computation is running.

    Attributes:
        x_data: Strictly increasing x values (timestamps)
        y_data: Scalars or 4-field OHLC tuples, aligned 1:1 with x_data

    Example:
        >>> series = SourceSeries(
        ...     x_data=[1, 2, 3],
        ...     y_data=[(10, 12, 9, 11), (11, 13, 10, 12), (12, 14, 11, 13)],
        ... )
        >>> series.is_ohlc
        True
    """
    x_data: Sequence[float]
    y_data: Sequence[Sample]

    def __len__(self) -> int:
        return len(self.x_data)

    @property
    def is_ohlc(self) -> bool:
        return len(self.y_data) > 0 and is_ohlc(self.y_data[0])

    def slice(self, start: int, stop: int) -> "SourceSeries":
        """Contiguous window [start, stop) of the series."""
        return SourceSeries(self.x_data[start:stop], self.y_data[start:stop])

    def check_lengths(self) -> None:
        """Raise SeriesError unless x_data and y_data are aligned 1:1."""
        if len(self.x_data) != len(self.y_data):
            raise SeriesError(
                f"x_data and y_data must have same length, "
                f"got {len(self.x_data)} and {len(self.y_data)}"
            )

    def validate(self) -> "SourceSeries":
        """Check alignment and ordering, return self for chaining.

        Raises:
            SeriesError: If x and y differ in length, x is not strictly
                increasing, or an OHLC sample does not have four fields
        """
        self.check_lengths()

        for i in range(1, len(self.x_data)):
            if self.x_data[i] <= self.x_data[i - 1]:
                raise SeriesError(f"x_data must be strictly increasing at index {i}")

        ohlc = self.is_ohlc
        for i, sample in enumerate(self.y_data):
            if is_ohlc(sample) != ohlc:
                raise SeriesError(f"Mixed scalar and OHLC samples at index {i}")
            if ohlc and len(sample) != len(OHLC_FIELDS):
                raise SeriesError(
                    f"OHLC sample at index {i} has {len(sample)} fields, expected 4"
                )
        return self


@dataclass(frozen=True)
class IndicatorOutput:
    """Immutable result of one indicator computation.

    Three parallel views of the same rows: full rows (x first), x values
    alone and value vectors alone. All three always have equal length.

    Attributes:
        values: Rows of (x, value_1, ..., value_n)
        x_data: x of every row
        y_data: Value vectors of every row, without x
    """
    values: tuple[IndicatorRow, ...]
    x_data: tuple[float, ...]
    y_data: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if not len(self.values) == len(self.x_data) == len(self.y_data):
            raise ValueError(
                "values, x_data and y_data must have same length, got "
                f"{len(self.values)}, {len(self.x_data)}, {len(self.y_data)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[IndicatorRow]) -> "IndicatorOutput":
        """Build all three views from full rows."""
        rows = tuple(tuple(row) for row in rows)
        return cls(
            values=rows,
            x_data=tuple(row[0] for row in rows),
            y_data=tuple(row[1:] for row in rows),
        )

    def __len__(self) -> int:
        return len(self.values)

    def point_at(self, index: int) -> IndicatorRow:
        """Read-only row lookup by index."""
        return self.values[index]

    def line(self, position: int) -> list[tuple[float, float]]:
        """(x, value) pairs of one output line by its position in the row vector."""
        return [(x, vector[position]) for x, vector in zip(self.x_data, self.y_data)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the chart-facing key names."""
        return {
            "values": [list(row) for row in self.values],
            "xData": list(self.x_data),
            "yData": [list(vector) for vector in self.y_data],
        }
