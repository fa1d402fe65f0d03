# src/mazegen/mapgen/generator.py
# Rooms-and-mazes dungeon generator.
#
# Starting from a stage of solid wall:
#   1. place randomly sized rooms, dropping any that overlap an earlier one;
#   2. fill the remaining solid space with growing-tree mazes;
#   3. label every open region and give each room its doors;
#   4. (optional) open connectors until no region is left on its own;
#   5. (optional) fill dead ends until every corridor leads somewhere;
#   6. drop the player and the enemies onto room floor.
#
# All randomness comes from one PMRandom, consumed phase by phase in that
# order, so a seed reproduces the same grid.

import logging
import random
from typing import Optional

from ..config import GeneratorConfig
from ..errors import InvalidDimensions
from ..grid import FrozenGrid, Grid
from ..rng import M, PMRandom
from ..tiles import Tile
from .connect import connect_regions, join_orphan_regions
from .maze import fill_mazes
from .placement import place_enemies, place_player
from .prune import remove_dead_ends
from .regions import DisjointSet, label_regions
from .rooms import place_rooms

logger = logging.getLogger(__name__)


class Generator:
    def __init__(
        self,
        width: int = 51,
        height: int = 51,
        room_tries: int = 30,
        room_extra_size: int = 0,
        extra_connector_chance: int = 20,
        winding_percent: int = 0,
        remove_dead_ends: bool = True,
        enemy_count: int = 10,
        *,
        ensure_connected: bool = False,
        seed: Optional[int] = None,
        rng: Optional[PMRandom] = None,
    ):
        self.config = GeneratorConfig(
            width=width,
            height=height,
            room_tries=room_tries,
            room_extra_size=room_extra_size,
            extra_connector_chance=extra_connector_chance,
            winding_percent=winding_percent,
            remove_dead_ends=remove_dead_ends,
            enemy_count=enemy_count,
            ensure_connected=ensure_connected,
        ).validate()
        if rng is None:
            if seed is None:
                seed = random.randrange(1, M)
            rng = PMRandom.seeded(seed)
        self.seed = seed
        self.rng = rng

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        *,
        seed: Optional[int] = None,
        rng: Optional[PMRandom] = None,
    ) -> "Generator":
        return cls(
            config.width,
            config.height,
            config.room_tries,
            config.room_extra_size,
            config.extra_connector_chance,
            config.winding_percent,
            config.remove_dead_ends,
            config.enemy_count,
            ensure_connected=config.ensure_connected,
            seed=seed,
            rng=rng,
        )

    def generate(self) -> FrozenGrid:
        cfg = self.config
        if cfg.width % 2 == 0 or cfg.height % 2 == 0 or cfg.width < 1 or cfg.height < 1:
            raise InvalidDimensions(cfg.width, cfg.height)

        rng = self.rng
        grid = Grid.empty(cfg.width, cfg.height)
        rooms = place_rooms(grid, rng, cfg.room_tries, cfg.room_extra_size)
        fill_mazes(grid, rng, cfg.winding_percent)

        regions = label_regions(grid)
        sets = DisjointSet(regions.count)
        doors = connect_regions(grid, rooms, rng, cfg.extra_connector_chance, regions, sets)
        if cfg.ensure_connected:
            doors += join_orphan_regions(grid, regions, sets)

        filled = remove_dead_ends(grid) if cfg.remove_dead_ends else 0

        player = place_player(grid, rooms, rng)
        enemies = place_enemies(grid, rooms, rng, cfg.enemy_count)

        logger.info(
            "generated %dx%d seed=%s rooms=%d regions=%d doors=%d dead_ends=%d player=%s enemies=%d/%d",
            cfg.width, cfg.height, self.seed, len(rooms), regions.count, doors,
            filled, player, enemies, cfg.enemy_count,
        )
        out = grid.freeze()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("layout:\n%s", out.dump())
        return out


def generate_grid(seed: int, **params) -> FrozenGrid:
    """One-shot helper: build a seeded Generator and run it."""
    return Generator(seed=seed, **params).generate()


def count_tiles(grid: FrozenGrid):
    return {t: grid.count(t) for t in Tile}
