"""Cycle-based hospital ward simulation: patient table, waiting queue, beds and discharge log."""

__version__ = "0.1.0"