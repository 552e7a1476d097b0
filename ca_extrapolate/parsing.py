from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from .errors import ParseError
from .rules import RuleTable
from .tape import ACTIVE, INACTIVE, Tape

_INITIAL_RE = re.compile(r"^initial state: (?P<state>[#.]+)$")
_RULE_RE = re.compile(r"^(?P<window>[#.]+) => (?P<output>[#.])$")


def parse_state(raw: str) -> list[int]:
    if any(ch not in (ACTIVE, INACTIVE) for ch in raw):
        raise ParseError(f"cells must be {ACTIVE!r} or {INACTIVE!r}: {raw!r}")
    return [1 if ch == ACTIVE else 0 for ch in raw]


def parse_initial_state(line: str, line_number: int | None = None) -> list[int]:
    match = _INITIAL_RE.match(line)
    if match is None:
        raise ParseError(f"initial state {line!r} does not match 'initial state: <cells>'", line_number)
    return parse_state(match.group("state"))


def parse_rule(line: str, line_number: int | None = None) -> tuple[list[int], int]:
    match = _RULE_RE.match(line)
    if match is None:
        raise ParseError(f"rule {line!r} does not match '<cells> => <cell>'", line_number)
    return parse_state(match.group("window")), parse_state(match.group("output"))[0]


def parse_lines(lines: Iterable[str]) -> tuple[Tape, RuleTable]:
    """Build the generation-0 tape and the rule table from input text.

    The table's window width is taken from the rules; the tape is bound to it.
    """
    initial: list[int] | None = None
    rules: list[tuple[list[int], int]] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("initial state:"):
            if initial is not None:
                raise ParseError("duplicate initial state", line_number)
            initial = parse_initial_state(line, line_number)
        elif initial is None:
            raise ParseError("rule found before the initial state", line_number)
        else:
            rules.append(parse_rule(line, line_number))

    if initial is None:
        raise ParseError("missing initial state")

    table = RuleTable(rules)
    tape = Tape(cells=initial, window_width=table.width)
    return tape, table


def read_input(path: str | Path) -> tuple[Tape, RuleTable]:
    text = Path(path).read_text()
    return parse_lines(text.splitlines())
