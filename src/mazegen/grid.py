from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import OutOfBounds
from .tiles import Tile, is_open

XY = Tuple[int, int]

UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
# Candidate order for the maze grower; changing it changes every seeded layout.
CARDINALS = (UP, DOWN, LEFT, RIGHT)


def _dump_rows(rows) -> str:
    return "\n".join("".join(t.char for t in row) for row in rows)


@dataclass
class Grid:
    """Mutable row-major tile buffer used while a dungeon is being built."""
    buf: List[Tile]
    width: int
    height: int

    @classmethod
    def empty(cls, width: int, height: int, fill: Tile = Tile.WALL) -> "Grid":
        return cls(buf=[fill] * (width * height), width=width, height=height)

    @classmethod
    def from_dump(cls, text: str) -> "Grid":
        rows = [ln for ln in text.splitlines() if ln]
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("dump rows must be non-empty and equally long")
        buf = [Tile.from_char(ch) for row in rows for ch in row]
        return cls(buf=buf, width=len(rows[0]), height=len(rows))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> Tile:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: Tile) -> None:
        self.buf[self.idx(x, y)] = v

    def neighbors(self, x: int, y: int) -> Iterator[XY]:
        for dx, dy in CARDINALS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def open_neighbors(self, x: int, y: int) -> int:
        # Outside the buffer counts as wall.
        return sum(1 for nx, ny in self.neighbors(x, y) if is_open(self.get(nx, ny)))

    def count(self, tile: Tile) -> int:
        return self.buf.count(tile)

    def as_matrix(self) -> List[List[Tile]]:
        w = self.width
        return [self.buf[y * w:(y + 1) * w] for y in range(self.height)]

    def dump(self) -> str:
        return _dump_rows(self.as_matrix())

    def freeze(self) -> "FrozenGrid":
        return FrozenGrid(cells=tuple(self.buf), width=self.width, height=self.height)


@dataclass(frozen=True)
class FrozenGrid:
    """Finished dungeon handed to callers; read-only view of a Grid's tiles."""
    cells: Tuple[Tile, ...]
    width: int
    height: int

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.cells[y * self.width + x]

    def rows(self) -> List[Tuple[Tile, ...]]:
        w = self.width
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height)]

    def count(self, tile: Tile) -> int:
        return self.cells.count(tile)

    def find(self, tile: Tile) -> List[XY]:
        w = self.width
        return [(i % w, i // w) for i, t in enumerate(self.cells) if t is tile]

    def first(self, tile: Tile) -> Optional[XY]:
        found = self.find(tile)
        return found[0] if found else None

    def thaw(self) -> Grid:
        return Grid(buf=list(self.cells), width=self.width, height=self.height)

    def dump(self) -> str:
        return _dump_rows(self.rows())
