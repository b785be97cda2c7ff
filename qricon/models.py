"""Value types passed between pipeline stages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .services.errors import err_invalid_dimension


@dataclass(frozen=True)
class ModuleMatrix:
    """Square grid of QR modules, ``True`` meaning dark."""

    rows: tuple[tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[bool]]) -> "ModuleMatrix":
        frozen = tuple(tuple(bool(cell) for cell in row) for row in rows)
        size = len(frozen)
        if size < 1:
            raise err_invalid_dimension("Module matrix must have at least one module")
        if any(len(row) != size for row in frozen):
            raise err_invalid_dimension(f"Module matrix must be square, got {size} rows of uneven width")
        return cls(rows=frozen)

    @property
    def size(self) -> int:
        return len(self.rows)

    def is_dark(self, x: int, y: int) -> bool:
        return self.rows[y][x]

    def dark_cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(x, y)`` for every dark module, row by row."""

        for y, row in enumerate(self.rows):
            for x, dark in enumerate(row):
                if dark:
                    yield x, y


@dataclass(frozen=True)
class SafeArea:
    """White patch behind the icon, clipped to the canvas.

    ``right`` and ``bottom`` are exclusive; ``size`` is the side before clipping.
    """

    left: int
    top: int
    right: int
    bottom: int
    size: int

    @property
    def is_empty(self) -> bool:
        return self.right <= self.left or self.bottom <= self.top

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class Placement:
    x_offset: int
    y_offset: int
    safe_area: SafeArea
