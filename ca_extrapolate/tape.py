from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)

ACTIVE = "#"
INACTIVE = "."
DEFAULT_WINDOW_WIDTH = 5


def _as_cells(values) -> np.ndarray:
    cells = np.array(values, dtype=np.uint8).reshape(-1)
    if cells.size and cells.max() > 1:
        raise ValueError("cells must be binary {0, 1}")
    cells.setflags(write=False)
    return cells


@dataclass(frozen=True, eq=False)
class Tape:
    """Binary cells plus the offset mapping array index to logical coordinate.

    Logical coordinate ``c`` lives at array index ``c + zero_offset``.
    """

    cells: np.ndarray
    zero_offset: int = 0
    window_width: int = DEFAULT_WINDOW_WIDTH
    _active: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.window_width < 1:
            raise ValueError("window_width must be >= 1")
        object.__setattr__(self, "cells", _as_cells(self.cells))
        object.__setattr__(self, "_active", np.flatnonzero(self.cells))

    @classmethod
    def from_string(cls, text: str, window_width: int = DEFAULT_WINDOW_WIDTH) -> Tape:
        unknown = set(text) - {ACTIVE, INACTIVE}
        if unknown:
            raise ValueError(f"cells must be {ACTIVE!r} or {INACTIVE!r}, got {''.join(sorted(unknown))!r}")
        bits = [1 if ch == ACTIVE else 0 for ch in text]
        return cls(cells=np.asarray(bits, dtype=np.uint8), window_width=window_width)

    def __len__(self) -> int:
        return int(self.cells.shape[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tape):
            return NotImplemented
        return (
            self.zero_offset == other.zero_offset
            and self.window_width == other.window_width
            and np.array_equal(self.cells, other.cells)
        )

    @property
    def padding(self) -> int:
        return self.window_width - 1

    def active_bounds(self) -> tuple[int, int] | None:
        """Lowest and highest active array indices, or None for an empty tape."""
        if self._active.size == 0:
            return None
        return int(self._active[0]), int(self._active[-1])

    def coordinates(self) -> np.ndarray:
        return self._active.astype(np.int64) - self.zero_offset

    def metric(self) -> int:
        """Sum of the logical coordinates of all active cells."""
        return int(self.coordinates().sum())

    def is_padded(self) -> bool:
        bounds = self.active_bounds()
        if bounds is None:
            return True
        lowest, highest = bounds
        return lowest >= self.padding and len(self) - 1 - highest >= self.padding

    def pad(self) -> Tape:
        """Grow the tape so every active cell has ``W - 1`` inactive cells on both sides.

        Returns ``self`` when nothing needs to be added.
        """
        bounds = self.active_bounds()
        if bounds is None:
            return self
        lowest, highest = bounds

        head = max(0, self.padding - lowest)
        tail = max(0, highest + self.window_width - len(self))
        if head == 0 and tail == 0:
            return self

        logger.debug("padding tape: head=%d tail=%d length=%d", head, tail, len(self))
        cells = np.zeros(len(self) + head + tail, dtype=np.uint8)
        cells[head : head + len(self)] = self.cells
        return Tape(cells=cells, zero_offset=self.zero_offset + head, window_width=self.window_width)

    def window_range(self) -> range:
        half = self.window_width // 2
        return range(half, max(half, len(self) - (self.window_width + 1) // 2))

    def window(self, index: int) -> np.ndarray:
        """The ``W`` cells centered on ``index``.

        The last complete window on the right is not part of the range.
        """
        if index not in self.window_range():
            raise IndexError(f"no complete window centered at index {index} (length {len(self)})")
        half = self.window_width // 2
        return self.cells[index - half : index + half + 1]

    def render(self) -> str:
        return "".join(ACTIVE if c else INACTIVE for c in self.cells.tolist())
