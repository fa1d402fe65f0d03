# Tile vocabulary shared by every generation phase and the renderers.

from enum import Enum


class Tile(Enum):
    WALL = "#"
    FLOOR = "."
    DOOR = "+"
    PLAYER = "@"
    ENEMY = "e"

    @property
    def char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, ch: str) -> "Tile":
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"unknown tile character {ch!r}") from None


# Entity markers stand on floor; renderers draw FLOOR underneath them.
MARKERS = (Tile.PLAYER, Tile.ENEMY)


def is_open(tile: Tile) -> bool:
    return tile is not Tile.WALL
