# src/mazegen/mapgen/placement.py
import logging
from typing import List, Optional

from ..grid import Grid, XY
from ..rng import PMRandom
from ..tiles import Tile
from .rooms import Room

logger = logging.getLogger(__name__)

MAX_PLACEMENT_TRIES = 1000


def sample_room_point(rooms: List[Room], rng: PMRandom) -> XY:
    """Draw order: room, then x, then y inside the room's inner span."""
    room = rng.choice(rooms)
    (x0, x1), (y0, y1) = room.inner_span()
    return rng.between(x0, x1), rng.between(y0, y1)


def place_marker(grid: Grid, rooms: List[Room], rng: PMRandom, tile: Tile) -> Optional[XY]:
    """
    Sample room points until one is plain floor, then write `tile` there.
    Gives up after MAX_PLACEMENT_TRIES samples; no rooms means no draws.
    """
    if not rooms:
        return None
    for _ in range(MAX_PLACEMENT_TRIES):
        x, y = sample_room_point(rooms, rng)
        if grid.get(x, y) is Tile.FLOOR:
            grid.set(x, y, tile)
            return (x, y)
    return None


def place_player(grid: Grid, rooms: List[Room], rng: PMRandom) -> Optional[XY]:
    return place_marker(grid, rooms, rng, Tile.PLAYER)


def place_enemies(grid: Grid, rooms: List[Room], rng: PMRandom, count: int) -> int:
    """
    Place up to `count` enemies within MAX_PLACEMENT_TRIES samples in total.
    Falling short is not an error; the number actually placed is returned.
    """
    if count < 0:
        raise ValueError(f"enemy count must be >= 0, got {count}")
    placed = 0
    if not rooms:
        return placed
    for _ in range(MAX_PLACEMENT_TRIES):
        if placed >= count:
            break
        x, y = sample_room_point(rooms, rng)
        if grid.get(x, y) is Tile.FLOOR:
            grid.set(x, y, Tile.ENEMY)
            placed += 1
    if placed < count:
        logger.debug("placed %d of %d enemies", placed, count)
    return placed
