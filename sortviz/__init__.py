"""Bubble and selection sort, drawn as bars and sounded one step at a time."""

__version__ = "0.1.0"
