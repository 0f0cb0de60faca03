"""Headless two-fighter card-duel simulator."""
