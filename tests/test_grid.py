import dataclasses

import pytest

from mazegen.errors import OutOfBounds
from mazegen.grid import Grid
from mazegen.tiles import Tile

def test_empty_is_all_wall():
    g = Grid.empty(5, 3)
    assert (g.width, g.height) == (5, 3)
    assert len(g.buf) == 15
    assert g.count(Tile.WALL) == 15

def test_get_set_and_bounds():
    g = Grid.empty(5, 3)
    g.set(4, 2, Tile.FLOOR)
    assert g.get(4, 2) is Tile.FLOOR
    assert g.buf[2 * 5 + 4] is Tile.FLOOR
    for x, y in ((-1, 0), (0, -1), (5, 0), (0, 3)):
        with pytest.raises(OutOfBounds):
            g.get(x, y)
        with pytest.raises(IndexError):
            g.set(x, y, Tile.FLOOR)

def test_open_neighbors_treats_outside_as_wall():
    g = Grid.from_dump("..#\n.##\n")
    assert g.open_neighbors(0, 0) == 2
    assert g.open_neighbors(1, 0) == 1
    assert g.open_neighbors(2, 1) == 0
    assert sorted(g.neighbors(0, 0)) == [(0, 1), (1, 0)]

def test_dump_round_trip_and_matrix():
    text = "#####\n#.@e#\n#+###"
    g = Grid.from_dump(text)
    assert g.dump() == text
    assert g.as_matrix()[1] == [Tile.WALL, Tile.FLOOR, Tile.PLAYER, Tile.ENEMY, Tile.WALL]

def test_from_dump_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_dump("###\n##\n")

def test_freeze_detaches_snapshot():
    g = Grid.empty(3, 3)
    g.set(1, 1, Tile.PLAYER)
    snap = g.freeze()
    g.set(1, 1, Tile.WALL)
    assert snap.get(1, 1) is Tile.PLAYER
    assert snap.find(Tile.PLAYER) == [(1, 1)]
    assert snap.first(Tile.DOOR) is None
    assert snap.count(Tile.WALL) == 8
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.width = 5
    with pytest.raises(OutOfBounds):
        snap.get(3, 0)
    assert snap.thaw().get(1, 1) is Tile.PLAYER
    assert snap.dump() == "###\n#@#\n###"
