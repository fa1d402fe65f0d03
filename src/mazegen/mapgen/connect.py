# src/mazegen/mapgen/connect.py
# Door placement between rooms and the regions around them.
#
# Per room: 2 doors, 3 when the extra-connector roll succeeds. Each try picks
# a side, a point along it (room corners excluded) and tests the wall cell
# just outside; it becomes a door when the cell beyond it is floor and no door
# touches it. A room's first door must join a region not yet connected to it;
# the doors after that may close loops.

import logging
from typing import List, Optional, Tuple

from ..grid import CARDINALS, DOWN, LEFT, RIGHT, UP, Grid, XY
from ..rng import PMRandom
from ..tiles import Tile
from .regions import NO_REGION, DisjointSet, RegionMap, label_regions
from .rooms import Room

logger = logging.getLogger(__name__)

MAX_DOOR_TRIES = 100
BASE_DOORS_PER_ROOM = 2

# Side index -> outward direction.
SIDES = (UP, RIGHT, DOWN, LEFT)


def no_doors_around(grid: Grid, x: int, y: int) -> bool:
    if grid.get(x, y) is Tile.DOOR:
        return False
    return all(grid.get(nx, ny) is not Tile.DOOR for nx, ny in grid.neighbors(x, y))


def pick_side(rng: PMRandom, last_side: Optional[int]) -> int:
    side = rng.below(4)
    if side == last_side:
        # Rotate onto one of the three other sides.
        side = (side + 1 + rng.below(3)) % 4
    return side


def door_candidate(room: Room, side: int, rng: PMRandom) -> Tuple[XY, XY]:
    """Return (wall cell just outside the room, cell one step further out)."""
    dx, dy = SIDES[side]
    if dy:
        px = rng.between(room.x + 1, room.x_max - 2)
        wy = room.y - 1 if dy < 0 else room.y_max
        return (px, wy), (px, wy + dy)
    py = rng.between(room.y + 1, room.y_max - 2)
    wx = room.x - 1 if dx < 0 else room.x_max
    return (wx, py), (wx + dx, py)


def connect_room(
    grid: Grid,
    room: Room,
    rng: PMRandom,
    extra_connector_chance: int,
    regions: RegionMap,
    sets: DisjointSet,
) -> int:
    target = BASE_DOORS_PER_ROOM + (1 if rng.chance(extra_connector_chance) else 0)
    room_region = regions.label(room.x, room.y)
    connections = 0
    tries = 0
    last_side: Optional[int] = None
    while connections < target and tries < MAX_DOOR_TRIES:
        tries += 1
        side = pick_side(rng, last_side)
        last_side = side
        (cx, cy), (bx, by) = door_candidate(room, side, rng)

        if not grid.in_bounds(bx, by) or grid.get(bx, by) is not Tile.FLOOR:
            continue
        if grid.get(cx, cy) is not Tile.WALL or not no_doors_around(grid, cx, cy):
            continue
        beyond = regions.label(bx, by)
        if connections == 0 and sets.joined(room_region, beyond):
            continue

        grid.set(cx, cy, Tile.DOOR)
        sets.union(room_region, beyond)
        connections += 1

    if connections < target:
        logger.debug("room at (%d, %d) got %d/%d doors after %d tries",
                     room.x, room.y, connections, target, tries)
    return connections


def connect_regions(
    grid: Grid,
    rooms: List[Room],
    rng: PMRandom,
    extra_connector_chance: int = 20,
    regions: Optional[RegionMap] = None,
    sets: Optional[DisjointSet] = None,
) -> int:
    """Open doors for every room in placement order. Returns doors placed."""
    if regions is None:
        regions = label_regions(grid)
    if sets is None:
        sets = DisjointSet(regions.count)
    doors = 0
    for room in rooms:
        doors += connect_room(grid, room, rng, extra_connector_chance, regions, sets)
    logger.debug("placed %d doors for %d rooms across %d regions", doors, len(rooms), regions.count)
    return doors


def join_orphan_regions(grid: Grid, regions: RegionMap, sets: DisjointSet) -> int:
    """Open connector walls until every region shares one root.

    Connectors are tried in row-major order; door spacing still applies, so a
    region whose only connectors touch existing doors stays unjoined.
    """
    remaining = len(sets.roots())
    doors = 0
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            if remaining <= 1:
                return doors
            if grid.get(x, y) is not Tile.WALL:
                continue
            labels = sorted({regions.label(x + dx, y + dy) for dx, dy in CARDINALS} - {NO_REGION})
            roots = {sets.find(r) for r in labels}
            if len(roots) < 2 or not no_doors_around(grid, x, y):
                continue
            grid.set(x, y, Tile.DOOR)
            doors += 1
            for r in labels[1:]:
                if sets.union(labels[0], r):
                    remaining -= 1
    if remaining > 1:
        logger.debug("%d regions left unjoined", remaining)
    return doors
