# src/mazegen/render/tileset.py
from __future__ import annotations
from functools import lru_cache

import pygame

from ..tiles import MARKERS, Tile
from .palette import COLORS


class Tileset:
    """
    Flat-colour tile surfaces:
      - walls, floors and doors fill the whole cell
      - player/enemy markers are drawn as a disc on top of a floor cell,
        since the grid does not keep the floor under an entity
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def view(self, tile: Tile, size: int) -> pygame.Surface:
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        if tile in MARKERS:
            img.fill(COLORS[Tile.FLOOR])
            pygame.draw.circle(img, COLORS[tile], (size // 2, size // 2), max(1, size * 3 // 8))
        else:
            img.fill(COLORS[tile])
        return img

    def get(self, tile: Tile) -> pygame.Surface:
        return self.view(tile, self.tile_size)
