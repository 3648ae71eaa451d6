# src/labyrinth/mapgen/generator.py
# Maze entry points: validate, carve, snapshot into an immutable Grid.

import logging

from ..errors import InvalidDimensionError
from ..grid import Grid
from ..rng import Seed, SeededEngine, resolve_seed
from ..timing import Clock, now_ms
from .carve import carve_maze, empty_field

logger = logging.getLogger(__name__)


def validate_dimension(dimension) -> int:
    if isinstance(dimension, bool) or not isinstance(dimension, (int, float)):
        raise InvalidDimensionError(f"dimension must be an integer, got {dimension!r}")
    if isinstance(dimension, float):
        if not dimension.is_integer():
            raise InvalidDimensionError(f"dimension must be an integer, got {dimension!r}")
        dimension = int(dimension)
    if dimension <= 0:
        raise InvalidDimensionError(f"dimension must be positive, got {dimension}")
    return dimension


def generate(dimension: int, engine: SeededEngine) -> Grid:
    """
    Carve a dimension×dimension perfect maze driven by `engine`.

    The engine is consumed; pass a fresh one per maze. Odd dimensions are
    conventional. With even ones the passage lattice reaches index n-1, so
    the far row and column have no outer wall (same as the deployed client).
    """
    dimension = validate_dimension(dimension)
    field = empty_field(dimension)
    draws = carve_maze(field, engine)
    grid = Grid.from_field(field, engine.seed)
    logger.debug("Carved %dx%d maze (seed=%d, %d draws):\n%s",
                 dimension, dimension, engine.seed, draws, grid)
    return grid


def generate_square_maze(dimension: int, seed: Seed = None, clock: Clock = now_ms) -> Grid:
    """Resolve `seed`, build a private engine for it, and generate."""
    dimension = validate_dimension(dimension)
    engine = SeededEngine(resolve_seed(seed, clock))
    return generate(dimension, engine)
