# src/mazegen/mapgen/rooms.py
# Random room proposals with overlap rejection. Rooms sit on the odd lattice
# so their edges line up with the maze passages grown around them.

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..grid import Grid, XY
from ..rng import PMRandom
from ..tiles import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    @property
    def x_max(self) -> int:
        # exclusive, like range()
        return self.x + self.w

    @property
    def y_max(self) -> int:
        return self.y + self.h

    def overlaps(self, other: "Room") -> bool:
        # Shared edges are not an overlap.
        return (
            self.x < other.x_max
            and other.x < self.x_max
            and self.y < other.y_max
            and other.y < self.y_max
        )

    def cells(self) -> Iterator[XY]:
        for iy in range(self.y, self.y_max):
            for ix in range(self.x, self.x_max):
                yield ix, iy

    def inner_span(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Inclusive x and y ranges at least two cells away from the wall ring."""
        return (self.x + 1, self.x_max - 2), (self.y + 1, self.y_max - 2)


def propose_room(grid: Grid, rng: PMRandom, extra_size: int):
    """Draw one candidate room, or None when the drawn size cannot fit.

    Draw order: size, stretch, stretch axis, then x and y only if it fits.
    """
    size = rng.below(2 + extra_size) * 2 + 3
    # Even stretch on one axis keeps both sides odd and stops rooms being
    # perfect squares every time.
    stretch = rng.below(1 + size // 2) * 2
    w = h = size
    if rng.chance(50):
        w += stretch
    else:
        h += stretch

    if w > grid.width - 2 or h > grid.height - 2:
        return None
    x = rng.below((grid.width - w) // 2) * 2 + 1
    y = rng.below((grid.height - h) // 2) * 2 + 1
    return Room(x, y, w, h)


def carve_room(grid: Grid, room: Room) -> None:
    for x, y in room.cells():
        grid.set(x, y, Tile.FLOOR)


def place_rooms(grid: Grid, rng: PMRandom, tries: int, extra_size: int = 0) -> List[Room]:
    """Best-effort room placement; a rejected try is simply dropped."""
    if extra_size < 0:
        raise ValueError(f"extra_size must be >= 0, got {extra_size}")
    rooms: List[Room] = []
    for _ in range(tries):
        room = propose_room(grid, rng, extra_size)
        if room is None:
            continue
        if any(room.overlaps(r) for r in rooms):
            continue
        carve_room(grid, room)
        rooms.append(room)
    logger.debug("placed %d of %d room tries", len(rooms), tries)
    return rooms
