from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from .errors import ConfigError
from .tape import DEFAULT_WINDOW_WIDTH

MAX_WINDOW_WIDTH = 24

Pattern = Sequence[int]


def pack_window(window: Pattern) -> int:
    """Pack a window into an integer code, leftmost cell most significant."""
    code = 0
    for cell in window:
        code = (code << 1) | (1 if cell else 0)
    return code


class RuleTable:
    """Exact-match lookup from a ``W``-cell window to the next center cell.

    Windows without an entry map to inactive.
    """

    def __init__(self, rules: Iterable[tuple[Pattern, int]] = (), width: int | None = None):
        entries: dict[int, int] = {}
        for pattern, output in rules:
            pattern = [int(bool(c)) for c in pattern]
            if width is None:
                width = len(pattern)
            if len(pattern) != width:
                raise ConfigError(f"rule window width {len(pattern)} does not match table width {width}")

            code = pack_window(pattern)
            output = int(bool(output))
            if entries.get(code, output) != output:
                raise ConfigError(f"ambiguous rule set: window {_render(pattern)} maps to both outputs")
            entries[code] = output

        if width is None:
            width = DEFAULT_WINDOW_WIDTH
        if not 1 <= width <= MAX_WINDOW_WIDTH:
            raise ConfigError(f"window width must be in [1, {MAX_WINDOW_WIDTH}], got {width}")

        self.width = width
        self._entries = entries
        self._outputs = np.zeros(1 << width, dtype=np.uint8)
        for code, output in entries.items():
            self._outputs[code] = output
        self._outputs.setflags(write=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RuleTable(width={self.width}, rules={len(self)})"

    def lookup(self, window: Pattern) -> int:
        if len(window) != self.width:
            raise ValueError(f"window of width {len(window)} passed to table of width {self.width}")
        return int(self._outputs[pack_window(window)])

    def lookup_codes(self, codes: np.ndarray) -> np.ndarray:
        return self._outputs[codes]

    def items(self) -> list[tuple[str, str]]:
        out = []
        for code, output in sorted(self._entries.items()):
            bits = [(code >> shift) & 1 for shift in range(self.width - 1, -1, -1)]
            out.append((_render(bits), _render([output])))
        return out


def _render(bits: Pattern) -> str:
    return "".join("#" if b else "." for b in bits)
