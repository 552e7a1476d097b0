from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .errors import ConfigError
from .simulate import Generation, Simulator
from .tape import Tape

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    RUNNING = "running"
    STABILIZED = "stabilized"


@dataclass(frozen=True)
class ExtrapolationResult:
    generations: int
    metric: int
    simulated: int
    stabilized: bool
    delta: int | None = None


class Extrapolator:
    """Summary metric at a target generation, short-circuiting linear growth.

    Simulation stops as soon as the metric's delta has repeated ``confidence``
    times in a row; the remaining generations are then projected as
    ``metric[s] + (N - s) * delta``.
    """

    def __init__(self, simulator: Simulator, confidence: int = 1):
        if confidence < 1:
            raise ConfigError(f"confidence must be >= 1, got {confidence}")
        self.simulator = simulator
        self.confidence = confidence

    def extrapolate(self, tape: Tape, generations: int) -> ExtrapolationResult:
        if generations < 0:
            raise ConfigError(f"generations must be >= 0, got {generations}")

        phase = Phase.RUNNING
        current = Generation(tape=self.simulator.prepare(tape), index=0)
        metric = current.metric
        last_delta: int | None = None
        repeats = 0

        while phase is Phase.RUNNING and current.index < generations:
            current = self.simulator.advance(current)
            next_metric = current.metric
            delta = next_metric - metric
            metric = next_metric
            logger.debug("generation %d: metric=%d delta=%d", current.index, metric, delta)

            if delta == last_delta:
                repeats += 1
                if repeats >= self.confidence:
                    phase = Phase.STABILIZED
            else:
                repeats = 0
                last_delta = delta

        if phase is Phase.STABILIZED:
            logger.info(
                "delta stabilized at generation %d: delta=%d confidence=%d",
                current.index,
                last_delta,
                self.confidence,
            )
            projected = metric + (generations - current.index) * last_delta
            return ExtrapolationResult(
                generations=generations,
                metric=projected,
                simulated=current.index,
                stabilized=True,
                delta=last_delta,
            )
        return ExtrapolationResult(
            generations=generations,
            metric=metric,
            simulated=current.index,
            stabilized=False,
            delta=last_delta,
        )

    def metric_at(self, tape: Tape, generations: int) -> int:
        return self.extrapolate(tape, generations).metric
