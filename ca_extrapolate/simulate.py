from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import numpy as np

from .errors import ConfigError
from .rules import RuleTable
from .tape import Tape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Generation:
    tape: Tape
    index: int = 0

    @property
    def metric(self) -> int:
        return self.tape.metric()


def window_codes(cells: np.ndarray, width: int) -> np.ndarray:
    """Packed code of every complete window, in order of its center index.

    Args:
        cells: shape [length], binary {0, 1}
        width: window width W

    Returns:
        shape [length - W + 1], code of the window starting at each index
    """
    n_windows = cells.shape[0] - width + 1
    if n_windows <= 0:
        return np.zeros(0, dtype=np.int64)
    codes = np.zeros(n_windows, dtype=np.int64)
    for j in range(width):
        codes = (codes << 1) | cells[j : j + n_windows]
    return codes


class Simulator:
    def __init__(self, rules: RuleTable):
        if rules.width % 2 == 0:
            raise ConfigError(f"window width {rules.width} is even, so a window has no center cell")
        self.rules = rules

    @property
    def window_width(self) -> int:
        return self.rules.width

    def prepare(self, tape: Tape) -> Tape:
        """Bind ``tape`` to this rule table's window width and pad it."""
        if tape.window_width != self.window_width:
            tape = replace(tape, window_width=self.window_width)
        return tape.pad()

    def step(self, tape: Tape) -> Tape:
        """Produce the next tape; ``tape`` is only read, never written."""
        tape = self.prepare(tape)
        half = self.window_width // 2

        nxt = np.zeros(len(tape), dtype=np.uint8)
        codes = window_codes(tape.cells[:-1], self.window_width)
        nxt[half : half + codes.shape[0]] = self.rules.lookup_codes(codes)

        return Tape(cells=nxt, zero_offset=tape.zero_offset, window_width=self.window_width).pad()

    def advance(self, generation: Generation) -> Generation:
        return Generation(tape=self.step(generation.tape), index=generation.index + 1)

    def run(self, tape: Tape, generations: int) -> Generation:
        """Simulate ``generations`` steps one by one."""
        if generations < 0:
            raise ConfigError(f"generations must be >= 0, got {generations}")
        current = Generation(tape=self.prepare(tape), index=0)
        for _ in range(generations):
            current = self.advance(current)
        return current
