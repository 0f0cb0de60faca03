"""Compare every strategy pairing on the same decks.

Usage:
    python scripts/compare_strategies.py --p-deck "2d 3h 5s 7c" --a-deck "3s 4h 4d 6c" [--runs 500]
"""

from __future__ import annotations

import argparse
import itertools
import time

import numpy as np

from card_duel.sim.config import CombatantConfig, SimulationConfig
from card_duel.sim.runner import BatchRunner
from card_duel.sim.strategies import StrategyTag


def run_comparison(p_deck: str, a_deck: str, n_runs: int, seed: int) -> None:
    tags = [t.value for t in StrategyTag]
    rows = []
    for p_strategy, a_strategy in itertools.product(tags, tags):
        config = SimulationConfig(
            protagonist=CombatantConfig(deck=p_deck, strategy=p_strategy),
            antagonist=CombatantConfig(deck=a_deck, strategy=a_strategy),
            num_runs=n_runs,
        )
        t0 = time.time()
        batch = BatchRunner(config).run_batch(base_seed=seed)
        elapsed = time.time() - t0

        p = np.asarray(batch.protagonist.all_damages)
        a = np.asarray(batch.antagonist.all_damages)
        rows.append((
            p_strategy, a_strategy,
            np.mean(p), np.median(p), np.mean(a), np.median(a),
            np.mean(p < a), elapsed,
        ))

    print(f"\n{'protagonist':<13}{'antagonist':<13}"
          f"{'P dmg':>8}{'P med':>8}{'A dmg':>8}{'A med':>8}{'P ahead':>9}{'time':>7}")
    print("-" * 74)
    for p_s, a_s, p_mean, p_med, a_mean, a_med, ahead, elapsed in rows:
        print(f"{p_s:<13}{a_s:<13}{p_mean:>8.2f}{p_med:>8.1f}"
              f"{a_mean:>8.2f}{a_med:>8.1f}{ahead:>9.1%}{elapsed:>6.1f}s")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare strategy pairings")
    parser.add_argument("--p-deck", required=True, help="Protagonist deck notation")
    parser.add_argument("--a-deck", required=True, help="Antagonist deck notation")
    parser.add_argument("--runs", type=int, default=500, help="Matches per pairing")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    args = parser.parse_args()
    run_comparison(args.p_deck, args.a_deck, args.runs, args.seed)


if __name__ == "__main__":
    main()
