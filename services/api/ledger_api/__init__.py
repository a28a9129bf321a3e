"""Poker ledger HTTP API: players, sessions and profit analytics."""

__version__ = "0.1.0"
