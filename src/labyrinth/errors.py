# src/labyrinth/errors.py
# Validation failures raised before any carving begins.


class LabyrinthError(ValueError):
    """Base class for every maze-core validation failure."""


class InvalidSeedError(LabyrinthError):
    """Seed is negative, non-integral, non-finite or not a number."""


class InvalidRangeError(LabyrinthError):
    """next_int() called with lo > hi (or non-integer bounds)."""


class InvalidDimensionError(LabyrinthError):
    """Dimension is not a positive integer."""
