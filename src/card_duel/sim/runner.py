"""Duel simulation runner -- ties the turn loop, strategies, and telemetry together.

Provides two key classes:

- **CombatSimulator**: Runs a single match for a fixed number of turns.
- **BatchRunner**: Repeats matches with fresh fighters and aggregates the
  results, synchronously or as chunked asyncio work.

And the three public entry points ``run_single_simulation``,
``run_batch_simulation`` and ``run_batch_simulation_async``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from card_duel.balance.metrics import aggregate_batch_results
from card_duel.sim.config import ANTAGONIST, PROTAGONIST, SimulationConfig
from card_duel.sim.core.rng import GameRNG
from card_duel.sim.mechanics import (
    raises_reaction_cost,
    resolve_card_duel,
    resolve_hit_roll,
    theoretical_deck_damage,
)
from card_duel.sim.strategies import get_strategy
from card_duel.sim.telemetry import SideSummary, SimulationResult, TurnAction, TurnSnapshot

if TYPE_CHECKING:
    from card_duel.balance.models import BatchResult
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant
    from card_duel.sim.mechanics import TheoreticalBounds
    from card_duel.sim.strategies import Strategy

logger = logging.getLogger(__name__)

MAX_COUNTERS_PER_ATTACK = 1
"""A counter cannot itself be countered, so one resolved attack allows one."""

DEFAULT_CHUNK_SIZE = 10

ProgressCallback = Callable[[int, int], Any]


class BatchCancelledError(Exception):
    """Raised when an async batch is cancelled between chunks."""

    def __init__(self, completed: int, total: int) -> None:
        self.completed = completed
        self.total = total
        super().__init__(f"Batch cancelled after {completed}/{total} runs")


# =====================================================================
# CombatSimulator
# =====================================================================

class CombatSimulator:
    """Runs one match between two combatants.

    Turns alternate between the fighters; on each turn the active fighter
    either defends (gaining temporary AC) or attacks.  The match always
    lasts ``num_turns`` turns: a fighter with an empty deck is forced to
    defend rather than ending the match.

    Parameters
    ----------
    protagonist, antagonist:
        The two fighters.  Both are reset (deck restored and reshuffled)
        at the start of :meth:`run`.
    rng:
        Owner RNG for this match.  Deck shuffles, combat rolls and each
        fighter's strategy draw from separate forks of it.
    num_turns:
        Number of turns to play.
    protagonist_starts:
        Whether the protagonist takes turn 0.
    """

    def __init__(
        self,
        protagonist: Combatant,
        antagonist: Combatant,
        rng: GameRNG,
        num_turns: int = 10,
        protagonist_starts: bool = True,
    ) -> None:
        self.protagonist = protagonist
        self.antagonist = antagonist
        self.rng = rng
        self.num_turns = num_turns
        self.protagonist_starts = protagonist_starts

        self._deck_rng = rng.fork("deck")
        self._combat_rng = rng.fork("combat")
        self._protagonist_strategy = get_strategy(
            protagonist.strategy, rng.fork("strategy:protagonist"),
        )
        self._antagonist_strategy = get_strategy(
            antagonist.strategy, rng.fork("strategy:antagonist"),
        )

        self.current_turn = 0
        self.turns: list[TurnSnapshot] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> SimulationResult:
        """Play every turn and return the compiled result."""
        # Bounds come from the static deck composition, so take them first.
        protagonist_potential = theoretical_deck_damage(self.protagonist.deck.original)
        antagonist_potential = theoretical_deck_damage(self.antagonist.deck.original)

        self.protagonist.reset(self._deck_rng)
        self.antagonist.reset(self._deck_rng)
        self.current_turn = 0
        self.turns = []

        for _ in range(self.num_turns):
            self.run_turn()

        return SimulationResult(
            seed=self.rng.seed,
            total_turns=self.num_turns,
            turns=list(self.turns),
            protagonist=_summarize(self.protagonist, antagonist_potential),
            antagonist=_summarize(self.antagonist, protagonist_potential),
        )

    def run_turn(self) -> TurnSnapshot:
        """Resolve the current turn and record its snapshot."""
        attacker, defender = self._combatants_in_order()

        # A defend bonus only lasts until the defender's own next turn.
        attacker.clear_temp_bonuses()

        if self._decide_action(attacker) is TurnAction.DEFEND:
            attacker.apply_defend()
            snapshot = self._snapshot(TurnAction.DEFEND, attacker)
        else:
            snapshot = self._execute_attack(attacker, defender)

        logger.debug(
            "Turn %d: %s %s (hit=%s, card=%s vs %s, dealt=%d, reflected=%d, countered=%s)",
            snapshot.turn_number, snapshot.attacker, snapshot.action_taken.value,
            snapshot.hit_roll, snapshot.attack_card, snapshot.defense_card,
            snapshot.damage_dealt, snapshot.damage_reflected, snapshot.counter_occurred,
        )

        self.turns.append(snapshot)
        self.current_turn += 1
        return snapshot

    # ------------------------------------------------------------------
    # Turn helpers
    # ------------------------------------------------------------------

    def _combatants_in_order(self) -> tuple[Combatant, Combatant]:
        """Return ``(attacker, defender)`` for the current turn."""
        # Turns alternate: 0 = starter, 1 = other, 2 = starter, ...
        protagonist_turn = (self.current_turn % 2 == 0) == self.protagonist_starts
        if protagonist_turn:
            return self.protagonist, self.antagonist
        return self.antagonist, self.protagonist

    def _strategy_for(self, combatant: Combatant) -> Strategy:
        if combatant is self.protagonist:
            return self._protagonist_strategy
        return self._antagonist_strategy

    def _decide_action(self, attacker: Combatant) -> TurnAction:
        if attacker.deck.is_empty:
            return TurnAction.DEFEND
        if self._strategy_for(attacker).should_defend_action(attacker):
            return TurnAction.DEFEND
        return TurnAction.ATTACK

    def _execute_attack(self, attacker: Combatant, defender: Combatant) -> TurnSnapshot:
        attack_card = self._strategy_for(attacker).select_attack_card(attacker)
        if attack_card is None:
            attacker.apply_defend()
            return self._snapshot(TurnAction.NO_CARDS, attacker)

        attacker.cards_played += 1
        raised = raises_reaction_cost(attack_card)
        hit = resolve_hit_roll(self._combat_rng, attacker, defender, attack_card)

        defense_card: Card | None = None
        reaction_occurred = False
        damage_dealt = 0
        damage_reflected = 0
        counters = 0
        counter_damage = 0

        if not hit.success:
            # A miss can still provoke a counter.
            result = self._try_counter(defender, attacker, raised)
            if result is not None:
                counters += 1
                counter_damage = result
        else:
            if self._will_react(defender, raised):
                defender.pay_reaction_cost(raised)
                defense_card = self._strategy_for(defender).select_defense_card(
                    defender, attack_card,
                )
                if defense_card is not None:
                    defender.cards_played += 1
                    reaction_occurred = True

            outcome = resolve_card_duel(
                self._combat_rng, attack_card, defense_card, is_counter=False,
            )
            attacker.take_damage(outcome.attacker_damage)
            defender.take_damage(outcome.defender_damage)
            damage_dealt = outcome.defender_damage
            damage_reflected = outcome.attacker_damage

            if damage_dealt > 0 and counters < MAX_COUNTERS_PER_ATTACK:
                result = self._try_counter(defender, attacker, raised)
                if result is not None:
                    counters += 1
                    counter_damage = result

        return self._snapshot(
            TurnAction.ATTACK,
            attacker,
            hit_roll=hit.total,
            hit_success=hit.success,
            attack_card=str(attack_card),
            defense_card=str(defense_card) if defense_card is not None else None,
            damage_dealt=damage_dealt,
            damage_reflected=damage_reflected,
            counter_damage=counter_damage,
            reaction_occurred=reaction_occurred,
            counter_occurred=counters > 0,
        )

    def _will_react(self, defender: Combatant, raised: bool) -> bool:
        return (
            self._combat_rng.chance(defender.reaction_chance)
            and defender.can_react(raised)
            and not defender.deck.is_empty
        )

    def _try_counter(
        self,
        counterer: Combatant,
        target: Combatant,
        raised: bool,
    ) -> int | None:
        """Attempt a single counter-attack against *target*.

        The counter uses the hit roll as usual, but *target* may not react
        to it and it cannot trigger another counter.  Ties deal no damage.

        Returns the damage dealt (0 on a miss), or ``None`` if no counter
        was attempted.
        """
        if not self._combat_rng.chance(counterer.counter_chance):
            return None
        if not counterer.can_react(raised):
            return None
        if counterer.deck.is_empty:
            return None

        counterer.pay_reaction_cost(raised)
        counterer.counters_used += 1

        counter_card = self._strategy_for(counterer).select_attack_card(counterer)
        if counter_card is None:
            return None
        counterer.cards_played += 1

        hit = resolve_hit_roll(self._combat_rng, counterer, target, counter_card)
        if not hit.success:
            return 0

        outcome = resolve_card_duel(self._combat_rng, counter_card, None, is_counter=True)
        target.take_damage(outcome.defender_damage)
        return outcome.defender_damage

    def _snapshot(self, action: TurnAction, attacker: Combatant, **details: Any) -> TurnSnapshot:
        p, a = self.protagonist, self.antagonist
        return TurnSnapshot(
            turn_number=self.current_turn,
            protagonist_damage=p.damage_taken.total,
            antagonist_damage=a.damage_taken.total,
            protagonist_resources=p.current_resources,
            antagonist_resources=a.current_resources,
            protagonist_cards_remaining=p.deck.remaining(),
            antagonist_cards_remaining=a.deck.remaining(),
            protagonist_reactions=p.reactions_used,
            antagonist_reactions=a.reactions_used,
            action_taken=action,
            attacker=attacker.name,
            **details,
        )


def _summarize(combatant: Combatant, opponent_potential: TheoreticalBounds) -> SideSummary:
    stats = combatant.damage_taken
    return SideSummary(
        total_damage=stats.total,
        min_damage=stats.min_hit,
        max_damage=stats.max_hit,
        avg_damage=stats.average,
        cards_played=combatant.cards_played,
        reactions_used=combatant.reactions_used,
        counters_used=combatant.counters_used,
        theoretical_min=opponent_potential.min,
        theoretical_avg=opponent_potential.avg,
        theoretical_max=opponent_potential.max,
    )


# =====================================================================
# Single run
# =====================================================================

def _run_single_match(config: SimulationConfig, seed: int) -> SimulationResult:
    """Build fresh fighters from *config* and play one match."""
    simulator = CombatSimulator(
        protagonist=config.protagonist.build(PROTAGONIST),
        antagonist=config.antagonist.build(ANTAGONIST),
        rng=GameRNG(seed),
        num_turns=config.num_turns,
        protagonist_starts=config.protagonist_starts,
    )
    return simulator.run()


def _resolve_seed(seed: int | None) -> int:
    return GameRNG(seed).seed


# =====================================================================
# BatchRunner
# =====================================================================

class BatchRunner:
    """Runs many independent matches and aggregates them.

    Run *i* of a batch uses seed ``base_seed + i`` and brand-new
    combatants, so the synchronous and asynchronous modes produce identical
    results for the same base seed.
    """

    def __init__(
        self,
        config: SimulationConfig,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.config = config
        self.chunk_size = chunk_size

    def run_batch(
        self,
        n_runs: int | None = None,
        base_seed: int | None = None,
    ) -> BatchResult:
        """Run *n_runs* matches (default ``config.num_runs``) back to back."""
        n_runs = self.config.num_runs if n_runs is None else n_runs
        base_seed = _resolve_seed(base_seed)
        logger.info("Running batch of %d matches (base_seed=%d)", n_runs, base_seed)

        results = [
            _run_single_match(self.config, base_seed + i) for i in range(n_runs)
        ]
        return self._finish(results, base_seed)

    async def run_batch_async(
        self,
        n_runs: int | None = None,
        base_seed: int | None = None,
        progress_callback: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> BatchResult:
        """Run the batch in chunks, yielding to the event loop between them.

        After every chunk *progress_callback* receives ``(completed, total)``
        and control returns to the loop.  If *cancel_event* is set when the
        next chunk is due, the partial results are discarded and
        :class:`BatchCancelledError` is raised.
        """
        n_runs = self.config.num_runs if n_runs is None else n_runs
        base_seed = _resolve_seed(base_seed)
        logger.info(
            "Running async batch of %d matches in chunks of %d (base_seed=%d)",
            n_runs, self.chunk_size, base_seed,
        )

        results: list[SimulationResult] = []
        for start in range(0, n_runs, self.chunk_size):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Batch cancelled after %d/%d matches", start, n_runs)
                raise BatchCancelledError(start, n_runs)

            stop = min(start + self.chunk_size, n_runs)
            for i in range(start, stop):
                results.append(_run_single_match(self.config, base_seed + i))

            if progress_callback is not None:
                progress_callback(stop, n_runs)
            await asyncio.sleep(0)

        return self._finish(results, base_seed)

    def _finish(self, results: list[SimulationResult], base_seed: int) -> BatchResult:
        batch = aggregate_batch_results(results, self.config.num_turns, base_seed=base_seed)
        logger.info(
            "Batch complete: protagonist avg damage %.2f, antagonist avg damage %.2f",
            batch.protagonist.damage_avg, batch.antagonist.damage_avg,
        )
        return batch


# =====================================================================
# Entry points
# =====================================================================

def run_single_simulation(
    config: SimulationConfig,
    seed: int | None = None,
) -> SimulationResult:
    """Play one match described by *config*."""
    return _run_single_match(config, _resolve_seed(seed))


def run_batch_simulation(
    config: SimulationConfig,
    num_runs: int | None = None,
    base_seed: int | None = None,
) -> BatchResult:
    """Play ``num_runs`` matches (default ``config.num_runs``) and aggregate."""
    return BatchRunner(config).run_batch(num_runs, base_seed=base_seed)


async def run_batch_simulation_async(
    config: SimulationConfig,
    num_runs: int | None = None,
    progress_callback: ProgressCallback | None = None,
    cancel_event: asyncio.Event | None = None,
    base_seed: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> BatchResult:
    """Chunked, cancellable version of :func:`run_batch_simulation`."""
    runner = BatchRunner(config, chunk_size=chunk_size)
    return await runner.run_batch_async(
        num_runs,
        base_seed=base_seed,
        progress_callback=progress_callback,
        cancel_event=cancel_event,
    )
