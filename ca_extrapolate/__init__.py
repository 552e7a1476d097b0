"""1D cellular automaton simulation with linear-growth extrapolation."""

from .config import ExtrapolationConfig, RunConfig
from .errors import CAError, ConfigError, ParseError
from .extrapolate import ExtrapolationResult, Extrapolator
from .rules import RuleTable
from .simulate import Generation, Simulator
from .tape import Tape

__all__ = [
    "CAError",
    "ConfigError",
    "ExtrapolationConfig",
    "ExtrapolationResult",
    "Extrapolator",
    "Generation",
    "ParseError",
    "RuleTable",
    "RunConfig",
    "Simulator",
    "Tape",
]
