# src/mazegen/mapgen/prune.py
# Dead-end removal: fill any open cell closed on three sides, repeated until
# a full pass changes nothing. Corridors shrink from their tips inward, so
# every corridor left afterwards leads somewhere.

import logging

from ..grid import Grid
from ..tiles import Tile, is_open

logger = logging.getLogger(__name__)


def is_dead_end(grid: Grid, x: int, y: int) -> bool:
    return is_open(grid.get(x, y)) and grid.open_neighbors(x, y) == 1


def remove_dead_ends(grid: Grid) -> int:
    """Returns the number of cells filled back in."""
    filled = 0
    passes = 0
    done = False
    while not done:
        done = True
        passes += 1
        for y in range(grid.height):
            for x in range(grid.width):
                if is_dead_end(grid, x, y):
                    grid.set(x, y, Tile.WALL)
                    filled += 1
                    done = False
    logger.debug("filled %d dead-end cells in %d passes", filled, passes)
    return filled
