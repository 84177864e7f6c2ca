"""Loading height maps: rows of space-separated integers."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, List, Tuple, Union

from wireframe.numbers import atoi
from wireframe.strings import split


class MapError(Exception):
    """Raised when a map file cannot be read or holds no rows."""


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of heights, indexed as ``grid[y][x]``."""

    cols: int
    grid: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.cols < 0:
            raise ValueError(f"cols must not be negative, got {self.cols}")
        for y, row in enumerate(self.grid):
            if len(row) != self.cols:
                raise ValueError(f"row {y} has {len(row)} values, expected {self.cols}")

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    def at(self, x: int, y: int) -> int:
        """Height at column ``x`` of row ``y``."""
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError(f"({x}, {y}) lies outside a {self.cols}x{self.rows} map")
        return self.grid[y][x]


def count_columns(line: str) -> int:
    """Number of space-separated fields in ``line``."""
    return len(split(line, " "))


def parse_row(line: str) -> List[int]:
    """Leading integer of every space-separated field in ``line``."""
    return [atoi(field) for field in split(line, " ")]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a map whose width is the field count of the first line.

    Shorter rows are padded with zeros and longer rows cut to that width.
    """
    rows = list(lines)
    if not rows:
        raise MapError("map holds no rows")
    cols = count_columns(rows[0])
    grid = []
    for line in rows:
        values = parse_row(line)[:cols]
        values.extend([0] * (cols - len(values)))
        grid.append(tuple(values))
    return HeightMap(cols, tuple(grid))


def read_map(path: Union[str, "PathLike[str]"]) -> HeightMap:
    """Read a map file; lines break on '\\n' only."""
    try:
        with open(path, "rb") as handle:
            lines = [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise MapError(f"cannot read map {path!s}: {exc.strerror or exc}") from exc
    return parse_map(lines)