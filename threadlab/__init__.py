"""Concurrency demonstrations: atomics, cells, locks, spin locks and condition variables."""

__version__ = "0.1.0"