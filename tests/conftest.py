from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from ca_extrapolate.parsing import read_input
from ca_extrapolate.rules import RuleTable

SAMPLE_PATH = Path(__file__).parent / "data" / "sample_input.txt"


def shift_right_rules(width: int = 5) -> RuleTable:
    # each cell takes the value of its left neighbour
    center = width // 2
    return RuleTable(
        (pattern, pattern[center - 1]) for pattern in itertools.product([0, 1], repeat=width)
    )


@pytest.fixture
def sample():
    return read_input(SAMPLE_PATH)


@pytest.fixture
def shift_rules():
    return shift_right_rules()
