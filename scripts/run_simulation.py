"""Run a single duel trace or a batch of duels from the command line.

Usage:
    python scripts/run_simulation.py --p-deck "2d 3h 5s" --a-deck "2c 4s 4h" [--runs 1000]
    python scripts/run_simulation.py --config duel.json --runs 1000 --output out/batch.json

Flags given alongside ``--config`` override the matching values from the file.
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from pydantic import ValidationError

from card_duel.balance.report import generate_run_trace, generate_text_report
from card_duel.balance.results import save_batch_result
from card_duel.sim.config import SimulationConfig
from card_duel.sim.runner import run_batch_simulation, run_single_simulation

# flag suffix -> CombatantConfig field
_SIDE_FLAGS = {
    "deck": "deck",
    "ac": "ac",
    "hit_bonus": "hit_bonus",
    "reaction": "reaction_chance",
    "counter": "counter_chance",
    "resources": "resources",
    "danger": "danger",
    "strategy": "strategy",
}


def _add_side_args(parser: argparse.ArgumentParser, prefix: str, label: str) -> None:
    parser.add_argument(f"--{prefix}-deck", help=f"{label} deck notation")
    parser.add_argument(f"--{prefix}-ac", type=int, help="default 10")
    parser.add_argument(f"--{prefix}-hit-bonus", type=int, help="default 0")
    parser.add_argument(f"--{prefix}-reaction", type=float, help="default 0.5")
    parser.add_argument(f"--{prefix}-counter", type=float, help="default 0.3")
    parser.add_argument(f"--{prefix}-resources", type=int, help="default 10")
    parser.add_argument(f"--{prefix}-danger", type=int, help="default 3")
    parser.add_argument(
        f"--{prefix}-strategy",
        choices=["balanced", "conservative", "aggressive"],
        help="default balanced",
    )


def _side_overrides(args: argparse.Namespace, prefix: str) -> dict:
    overrides = {}
    for flag, field in _SIDE_FLAGS.items():
        value = getattr(args, f"{prefix}_{flag}")
        if value is not None:
            overrides[field] = value
    return overrides


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load ``--config`` (or the defaults) and apply every flag that was given.

    Raises pydantic ``ValidationError`` if the merged values are invalid.
    """
    if args.config:
        base = SimulationConfig.model_validate_json(Path(args.config).read_text())
    else:
        base = SimulationConfig()
    data = base.model_dump()

    for side, prefix in (("protagonist", "p"), ("antagonist", "a")):
        data[side].update(_side_overrides(args, prefix))
    if args.turns is not None:
        data["num_turns"] = args.turns
    if args.antagonist_starts:
        data["protagonist_starts"] = False
    if args.runs is not None:
        data["num_runs"] = args.runs
    return SimulationConfig.model_validate(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate card duels")
    parser.add_argument("--config", type=str, help="JSON SimulationConfig file")
    _add_side_args(parser, "p", "Protagonist")
    _add_side_args(parser, "a", "Antagonist")
    parser.add_argument("--turns", type=int, default=None, help="Turns per match (default 10)")
    parser.add_argument("--antagonist-starts", action="store_true")
    parser.add_argument("--runs", type=int, default=None, help="Batch size (omit for one traced match)")
    parser.add_argument("--seed", type=int, default=None, help="(Base) seed")
    parser.add_argument("--output", type=str, help="Write batch result JSON here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every turn")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValidationError as exc:
        parser.error(str(exc))

    if args.runs is None:
        result = run_single_simulation(config, seed=args.seed)
        print(generate_run_trace(result))
        return

    print(f"Running {config.num_runs:,} matches...")
    t0 = time.perf_counter()
    batch = run_batch_simulation(config, base_seed=args.seed)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    if args.output:
        save_batch_result(batch, args.output)
        print(f"Saved batch result to {args.output}")

    print()
    print(generate_text_report(batch))


if __name__ == "__main__":
    main()
