import pytest

from mazegen.grid import Grid
from mazegen.mapgen.connect import (
    connect_regions, connect_room, door_candidate, join_orphan_regions,
    no_doors_around, pick_side,
)
from mazegen.mapgen.maze import fill_mazes
from mazegen.mapgen.regions import DisjointSet, label_regions
from mazegen.mapgen.rooms import Room, place_rooms
from mazegen.rng import PMRandom
from mazegen.tiles import Tile

# A 3x3 room with a corridor to its right; only the right side can take a door.
ROOM_AND_CORRIDOR = (
    "#######\n"
    "#...#.#\n"
    "#...#.#\n"
    "#...#.#\n"
    "#######"
)

def test_pick_side_never_repeats():
    rng = PMRandom.seeded(21)
    last = None
    for _ in range(500):
        side = pick_side(rng, last)
        assert 0 <= side < 4
        assert side != last
        last = side

def test_door_candidates_skip_corners():
    rng = PMRandom.seeded(2)
    room = Room(3, 5, 5, 7)
    inside = set(room.cells())
    for side in range(4):
        for _ in range(50):
            (cx, cy), (bx, by) = door_candidate(room, side, rng)
            assert (cx, cy) not in inside
            assert abs(bx - cx) + abs(by - cy) == 1
            if side in (0, 2):
                assert room.x + 1 <= cx <= room.x_max - 2
                assert cy in (room.y - 1, room.y_max)
            else:
                assert room.y + 1 <= cy <= room.y_max - 2
                assert cx in (room.x - 1, room.x_max)

def test_single_reachable_side_gets_one_door():
    g = Grid.from_dump(ROOM_AND_CORRIDOR)
    regions = label_regions(g)
    sets = DisjointSet(regions.count)
    placed = connect_room(g, Room(1, 1, 3, 3), PMRandom.seeded(5), 100, regions, sets)
    assert placed == 1
    assert g.get(4, 2) is Tile.DOOR
    assert g.count(Tile.DOOR) == 1
    assert sets.joined(0, 1)

def test_first_door_must_join_something_new():
    g = Grid.from_dump(ROOM_AND_CORRIDOR)
    regions = label_regions(g)
    sets = DisjointSet(regions.count)
    sets.union(0, 1)
    assert connect_room(g, Room(1, 1, 3, 3), PMRandom.seeded(5), 0, regions, sets) == 0
    assert g.count(Tile.DOOR) == 0

def test_no_doors_around():
    g = Grid.from_dump(
        "#####\n"
        "#.+.#\n"
        "#####"
    )
    assert not no_doors_around(g, 2, 1)
    assert not no_doors_around(g, 1, 1)
    assert not no_doors_around(g, 2, 0)
    assert no_doors_around(g, 0, 0)
    assert no_doors_around(g, 4, 1)

@pytest.mark.parametrize("seed", [1, 17, 4242])
def test_doors_sit_between_open_cells(seed):
    rng = PMRandom.seeded(seed)
    g = Grid.empty(41, 31)
    rooms = place_rooms(g, rng, 30)
    fill_mazes(g, rng, 20)
    doors = connect_regions(g, rooms, rng, 50)
    room_cells = {c for room in rooms for c in room.cells()}
    assert doors == g.count(Tile.DOOR)
    assert doors >= 1
    for y in range(g.height):
        for x in range(g.width):
            if g.get(x, y) is not Tile.DOOR:
                continue
            assert all(g.get(nx, ny) is not Tile.DOOR for nx, ny in g.neighbors(x, y))
            assert g.open_neighbors(x, y) >= 2
            assert any(n in room_cells for n in g.neighbors(x, y))

def test_join_orphans_links_everything():
    g = Grid.from_dump(
        "#######\n"
        "#.#.#.#\n"
        "#######"
    )
    regions = label_regions(g)
    sets = DisjointSet(regions.count)
    assert join_orphan_regions(g, regions, sets) == 2
    assert g.dump() == (
        "#######\n"
        "#.+.+.#\n"
        "#######"
    )
    assert len({sets.find(r) for r in range(regions.count)}) == 1
    assert label_regions(g).count == 1

def test_join_orphans_is_a_no_op_when_joined():
    g = Grid.from_dump(ROOM_AND_CORRIDOR)
    regions = label_regions(g)
    sets = DisjointSet(regions.count)
    sets.union(0, 1)
    assert join_orphan_regions(g, regions, sets) == 0
    assert g.count(Tile.DOOR) == 0

# A 3x3 room inside a ring corridor; each side has one usable door cell.
ROOM_IN_RING = (
    "#########\n"
    "#.......#\n"
    "#.#####.#\n"
    "#.#...#.#\n"
    "#.#...#.#\n"
    "#.#...#.#\n"
    "#.#####.#\n"
    "#.......#\n"
    "#########"
)

@pytest.mark.parametrize("chance,want", [(0, 2), (100, 3)])
def test_extra_connector_chance_sets_door_target(chance, want):
    for seed in range(1, 21):
        g = Grid.from_dump(ROOM_IN_RING)
        regions = label_regions(g)
        sets = DisjointSet(regions.count)
        placed = connect_room(g, Room(3, 3, 3, 3), PMRandom.seeded(seed), chance, regions, sets)
        assert placed == want
        assert g.count(Tile.DOOR) == want
        doors = {(x, y) for y in range(9) for x in range(9) if g.get(x, y) is Tile.DOOR}
        assert doors <= {(4, 2), (4, 6), (2, 4), (6, 4)}
        assert sets.joined(0, 1)
