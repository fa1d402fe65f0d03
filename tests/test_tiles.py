import pytest

from mazegen.tiles import MARKERS, Tile, is_open

def test_dump_characters():
    assert [t.char for t in Tile] == ["#", ".", "+", "@", "e"]
    for t in Tile:
        assert Tile.from_char(t.char) is t

def test_unknown_character():
    with pytest.raises(ValueError):
        Tile.from_char("x")

def test_open_classification():
    assert not is_open(Tile.WALL)
    assert all(is_open(t) for t in (Tile.FLOOR, Tile.DOOR, Tile.PLAYER, Tile.ENEMY))
    assert MARKERS == (Tile.PLAYER, Tile.ENEMY)
