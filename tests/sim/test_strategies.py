"""Tests for the three card-selection strategies and their lookup."""

from __future__ import annotations

import logging

import pytest

from card_duel.sim.core.cards import Card, Deck
from card_duel.sim.core.entities import Combatant
from card_duel.sim.core.rng import GameRNG
from card_duel.sim.strategies import (
    STRATEGIES,
    AggressiveStrategy,
    BalancedStrategy,
    ConservativeStrategy,
    StrategyTag,
    get_strategy,
    parse_strategy_tag,
)


def _make_combatant(deck: str) -> Combatant:
    return Combatant(name="Fighter", deck=Deck.from_string(deck))


def _card(token: str) -> Card:
    return Card.from_string(token)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

class TestStrategyLookup:
    def test_every_tag_registered(self):
        assert set(STRATEGIES) == set(StrategyTag)

    @pytest.mark.parametrize("tag,cls", [
        ("balanced", BalancedStrategy),
        ("conservative", ConservativeStrategy),
        ("aggressive", AggressiveStrategy),
        ("Aggressive", AggressiveStrategy),
        (StrategyTag.CONSERVATIVE, ConservativeStrategy),
    ])
    def test_get_strategy(self, tag, cls):
        assert type(get_strategy(tag)) is cls

    def test_random_alias(self):
        assert parse_strategy_tag("random") is StrategyTag.BALANCED

    def test_unknown_falls_back_to_balanced(self, caplog):
        with caplog.at_level(logging.WARNING):
            strategy = get_strategy("berserk")
        assert isinstance(strategy, BalancedStrategy)
        assert "berserk" in caplog.text


# ---------------------------------------------------------------------------
# Balanced
# ---------------------------------------------------------------------------

class TestBalancedStrategy:
    def test_attack_takes_a_card(self, scripted_rng):
        c = _make_combatant("4s 7h")
        card = BalancedStrategy(scripted_rng()).select_attack_card(c)
        assert card == _card("4s")
        assert c.deck.peek() == [_card("7h")]

    def test_attack_empty_deck(self, scripted_rng):
        assert BalancedStrategy(scripted_rng()).select_attack_card(_make_combatant("")) is None

    def test_defends_with_card_under_threshold(self, scripted_rng):
        c = _make_combatant("4s 7h")
        card = BalancedStrategy(scripted_rng(floats=[0.6])).select_defense_card(c, _card("5s"))
        assert card is not None
        assert c.deck.remaining() == 1

    def test_declines_defense_over_threshold(self, scripted_rng):
        c = _make_combatant("4s 7h")
        card = BalancedStrategy(scripted_rng(floats=[0.8])).select_defense_card(c, _card("5s"))
        assert card is None
        assert c.deck.remaining() == 2

    def test_defend_action_probability(self, scripted_rng):
        c = _make_combatant("4s")
        assert BalancedStrategy(scripted_rng(floats=[0.1])).should_defend_action(c)
        assert not BalancedStrategy(scripted_rng(floats=[0.3])).should_defend_action(c)

    def test_random_attack_covers_deck(self):
        strategy = BalancedStrategy(GameRNG(4))
        seen = set()
        for _ in range(200):
            c = _make_combatant("1s 2s 3s")
            seen.add(strategy.select_attack_card(c))
        assert seen == {_card("1s"), _card("2s"), _card("3s")}


# ---------------------------------------------------------------------------
# Conservative
# ---------------------------------------------------------------------------

class TestConservativeStrategy:
    def test_attacks_with_lowest(self, scripted_rng):
        c = _make_combatant("5s 2h 9c")
        card = ConservativeStrategy(scripted_rng()).select_attack_card(c)
        assert card == _card("2h")
        assert _card("2h") not in c.deck.peek()

    def test_defends_with_lowest_sufficient(self, scripted_rng):
        c = _make_combatant("2s 7c 5h")
        card = ConservativeStrategy(scripted_rng()).select_defense_card(c, _card("4s"))
        assert card == _card("5h")

    def test_equal_value_is_sufficient(self, scripted_rng):
        c = _make_combatant("2s 4d 7c")
        card = ConservativeStrategy(scripted_rng()).select_defense_card(c, _card("4s"))
        assert card == _card("4d")

    def test_sacrifices_lowest_sometimes(self, scripted_rng):
        c = _make_combatant("3s 2s")
        card = ConservativeStrategy(scripted_rng(floats=[0.1])).select_defense_card(c, _card("9s"))
        assert card == _card("2s")

    def test_declines_when_outmatched(self, scripted_rng):
        c = _make_combatant("3s 2s")
        card = ConservativeStrategy(scripted_rng(floats=[0.5])).select_defense_card(c, _card("9s"))
        assert card is None
        assert c.deck.remaining() == 2

    def test_defend_probability_rises_with_scarcity(self, scripted_rng):
        c = _make_combatant("1s 2s 3s 4s")
        # Full deck: P(defend) = 0.4 - 0.3 = 0.1
        assert ConservativeStrategy(scripted_rng(floats=[0.05])).should_defend_action(c)
        assert not ConservativeStrategy(scripted_rng(floats=[0.15])).should_defend_action(c)
        c.deck.draw()
        c.deck.draw()
        c.deck.draw()
        c.deck.draw()
        # Empty deck: P(defend) = 0.4
        assert ConservativeStrategy(scripted_rng(floats=[0.35])).should_defend_action(c)


# ---------------------------------------------------------------------------
# Aggressive
# ---------------------------------------------------------------------------

class TestAggressiveStrategy:
    def test_attacks_with_highest(self, scripted_rng):
        c = _make_combatant("5s 2h 9c")
        assert AggressiveStrategy(scripted_rng()).select_attack_card(c) == _card("9c")
        assert c.deck.remaining() == 2

    def test_defends_with_lowest_strict_winner(self, scripted_rng):
        c = _make_combatant("5h 9s 6c")
        card = AggressiveStrategy(scripted_rng()).select_defense_card(c, _card("5s"))
        assert card == _card("6c")

    def test_declines_half_the_time_when_outmatched(self, scripted_rng):
        c = _make_combatant("2s 3s")
        card = AggressiveStrategy(scripted_rng(floats=[0.3])).select_defense_card(c, _card("9s"))
        assert card is None
        assert c.deck.remaining() == 2

    def test_throws_lowest_otherwise(self, scripted_rng):
        c = _make_combatant("3s 2s")
        card = AggressiveStrategy(scripted_rng(floats=[0.7])).select_defense_card(c, _card("9s"))
        assert card == _card("2s")

    def test_rarely_defends(self, scripted_rng):
        c = _make_combatant("4s")
        assert AggressiveStrategy(scripted_rng(floats=[0.05])).should_defend_action(c)
        assert not AggressiveStrategy(scripted_rng(floats=[0.15])).should_defend_action(c)

    def test_empty_deck(self, scripted_rng):
        strategy = AggressiveStrategy(scripted_rng())
        c = _make_combatant("")
        assert strategy.select_attack_card(c) is None
        assert strategy.select_defense_card(c, _card("3s")) is None
