from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .config import RunConfig, build_run_config, load_run_config
from .errors import CAError
from .extrapolate import Extrapolator
from .parsing import read_input
from .simulate import Simulator

logger = logging.getLogger(__name__)


def evaluate(config: RunConfig) -> dict[str, Any]:
    tape, rules = read_input(config.input_path)
    simulator = Simulator(rules)
    extrapolator = Extrapolator(simulator, confidence=config.extrapolation.confidence)

    results = []
    for n in config.generations:
        entry = asdict(extrapolator.extrapolate(tape, n))
        if n <= config.direct_limit:
            entry["direct_metric"] = simulator.run(tape, n).metric
        results.append(entry)

    return {
        "name": config.name,
        "input": str(config.input_path),
        "window_width": rules.width,
        "rules": len(rules),
        "confidence": config.extrapolation.confidence,
        "results": results,
    }


def run_cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Project a 1D automaton's coordinate sum to a target generation")
    parser.add_argument("--input", default=None, help="Path to the initial state and rules")
    parser.add_argument("--config", default=None, help="Path to run config YAML")
    parser.add_argument("--generations", type=int, nargs="+", default=None)
    parser.add_argument("--confidence", type=int, default=None, help="Repeated deltas required before projecting")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--json-out", default="")
    args = parser.parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.generations is not None:
        overrides["generations"] = args.generations
    if args.confidence is not None:
        overrides["extrapolation"] = {"confidence": args.confidence}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    try:
        if args.config:
            cfg = load_run_config(args.config, overrides)
        else:
            cfg = build_run_config(overrides=overrides)
        logging.basicConfig(level=cfg.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
        report = evaluate(cfg)
    except (CAError, OSError) as exc:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logger.error("%s", exc)
        return 2

    text = json.dumps(report, indent=2)
    print(text)
    if args.json_out:
        Path(args.json_out).write_text(text)
    return 0


def main() -> None:
    sys.exit(run_cli())
