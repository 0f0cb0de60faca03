"""Match simulation: cards, rules, strategies, and the turn engine."""
