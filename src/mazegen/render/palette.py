# Shared colours for the PNG renderer and the pygame viewer.
from typing import Dict, Tuple

from ..tiles import Tile

RGBA = Tuple[int, int, int, int]

COLORS: Dict[Tile, RGBA] = {
    Tile.WALL:   ( 48,  48,  56, 255),
    Tile.FLOOR:  (200, 196, 180, 255),
    Tile.DOOR:   (150,  90,  40, 255),
    Tile.PLAYER: ( 40, 120, 230, 255),
    Tile.ENEMY:  (210,  50,  50, 255),
}
