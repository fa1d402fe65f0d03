# src/mazegen/mapgen/maze.py
# "Growing tree" maze fill: newest-cell selection (a stack), two-cell steps
# on the odd lattice, and a winding knob that biases toward going straight.
# http://www.astrolog.org/labyrnth/algrithm.htm

import logging
from typing import List, Optional

from ..grid import CARDINALS, Grid, XY
from ..rng import PMRandom
from ..tiles import Tile

logger = logging.getLogger(__name__)

MAX_GROW_STEPS = 10_000


def can_carve(grid: Grid, x: int, y: int) -> bool:
    # The outer rim always stays wall.
    return 0 < x < grid.width - 1 and 0 < y < grid.height - 1 and grid.get(x, y) is Tile.WALL


def open_directions(grid: Grid, x: int, y: int) -> List[XY]:
    return [
        (dx, dy)
        for dx, dy in CARDINALS
        if can_carve(grid, x + dx, y + dy) and can_carve(grid, x + 2 * dx, y + 2 * dy)
    ]


def grow_maze(grid: Grid, rng: PMRandom, start_x: int, start_y: int, winding_percent: int) -> int:
    """Grow one maze section from (start_x, start_y). Returns cells carved."""
    grid.set(start_x, start_y, Tile.FLOOR)
    carved = 1
    cells: List[XY] = [(start_x, start_y)]
    last_dir: Optional[XY] = None

    steps = 0
    while cells:
        if steps >= MAX_GROW_STEPS:
            logger.debug("maze from (%d, %d) hit the %d step cap", start_x, start_y, MAX_GROW_STEPS)
            break
        steps += 1

        x, y = cells[-1]
        dirs = open_directions(grid, x, y)
        if not dirs:
            cells.pop()
            last_dir = None
            continue

        if last_dir in dirs and rng.below(100) < 100 - winding_percent:
            dx, dy = last_dir
        else:
            dx, dy = rng.choice(dirs)

        grid.set(x + dx, y + dy, Tile.FLOOR)
        grid.set(x + 2 * dx, y + 2 * dy, Tile.FLOOR)
        carved += 2
        cells.append((x + 2 * dx, y + 2 * dy))
        last_dir = (dx, dy)
    return carved


def fill_mazes(grid: Grid, rng: PMRandom, winding_percent: int = 0) -> int:
    """Seed a maze at every odd cell that is still solid."""
    carved = 0
    sections = 0
    for y in range(1, grid.height, 2):
        for x in range(1, grid.width, 2):
            if grid.get(x, y) is not Tile.WALL:
                continue
            carved += grow_maze(grid, rng, x, y, winding_percent)
            sections += 1
    logger.debug("grew %d maze sections, %d cells", sections, carved)
    return carved
