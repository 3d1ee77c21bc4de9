"""Tasbih counter: four fixed phrases, persistent tallies, desktop window."""

__version__ = "1.0.0"
