# src/mazegen/mapgen/regions.py
# Explicit region labelling: flood-fill every open component once, then let
# the connector merge labels through a disjoint-set as doors are opened.

from collections import deque
from dataclasses import dataclass
from typing import List

from ..grid import Grid
from ..tiles import Tile, is_open

NO_REGION = -1


class DisjointSet:
    def __init__(self, n: int):
        self.parent = list(range(n))

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        # Lower root wins so merge results do not depend on argument order.
        if rb < ra:
            ra, rb = rb, ra
        self.parent[rb] = ra
        return True

    def joined(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def roots(self) -> List[int]:
        return sorted({self.find(i) for i in range(len(self.parent))})


@dataclass
class RegionMap:
    labels: List[int]
    width: int
    count: int

    def label(self, x: int, y: int) -> int:
        return self.labels[y * self.width + x]


def label_regions(grid: Grid) -> RegionMap:
    """Label 4-connected open components in row-major discovery order."""
    w, h = grid.width, grid.height
    labels = [NO_REGION] * (w * h)
    count = 0
    for sy in range(h):
        for sx in range(w):
            i = sy * w + sx
            if labels[i] != NO_REGION or grid.get(sx, sy) is Tile.WALL:
                continue
            labels[i] = count
            q = deque([(sx, sy)])
            while q:
                x, y = q.popleft()
                for nx, ny in grid.neighbors(x, y):
                    j = ny * w + nx
                    if labels[j] == NO_REGION and is_open(grid.get(nx, ny)):
                        labels[j] = count
                        q.append((nx, ny))
            count += 1
    return RegionMap(labels=labels, width=w, count=count)
