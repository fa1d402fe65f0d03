#!/usr/bin/env python3
# Static viewer for generated dungeons (no gameplay).
# - Sources: a text dump, or the generator with a seed
# - Regenerate with the next / previous seed: RIGHT / LEFT
# - Toggle dead-end removal: D    Toggle winding 0 <-> 60: W
# - Redraws only when something changes

import argparse
from dataclasses import replace

import pygame

from mazegen.config import DEFAULTS
from mazegen.grid import Grid
from mazegen.mapgen.generator import Generator
from mazegen.render.tileset import Tileset


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1, help="Seed for the first dungeon")
    ap.add_argument("--width", type=int, default=DEFAULTS.width)
    ap.add_argument("--height", type=int, default=DEFAULTS.height)
    ap.add_argument("--rooms", type=int, default=DEFAULTS.room_tries, help="Room placement tries")
    ap.add_argument("--enemies", type=int, default=DEFAULTS.enemy_count)
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--dump", type=str, default=None, help="Show a text dump instead of generating")
    args = ap.parse_args()

    cfg = replace(
        DEFAULTS, width=args.width, height=args.height,
        room_tries=args.rooms, enemy_count=args.enemies,
    ).round_up_odd()
    seed = args.seed

    def load_grid():
        if args.dump:
            with open(args.dump, encoding="utf-8") as f:
                return Grid.from_dump(f.read())
        return Generator.from_config(cfg, seed=seed).generate()

    grid = load_grid()
    pygame.init()
    screen = pygame.display.set_mode((grid.width * args.tile, grid.height * args.tile))
    tiles = Tileset(args.tile)
    clock = pygame.time.Clock()

    dirty = True
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif args.dump:
                    continue
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                    grid, dirty = load_grid(), True
                elif ev.key == pygame.K_LEFT:
                    seed = max(1, seed - 1)
                    grid, dirty = load_grid(), True
                elif ev.key == pygame.K_d:
                    cfg = replace(cfg, remove_dead_ends=not cfg.remove_dead_ends)
                    grid, dirty = load_grid(), True
                elif ev.key == pygame.K_w:
                    cfg = replace(cfg, winding_percent=60 if cfg.winding_percent == 0 else 0)
                    grid, dirty = load_grid(), True

        if dirty:
            for y in range(grid.height):
                for x in range(grid.width):
                    screen.blit(tiles.get(grid.get(x, y)), (x * args.tile, y * args.tile))
            source = args.dump or f"seed {seed}"
            pygame.display.set_caption(
                f"mazegen viewer - {source}  dead-ends:{'removed' if cfg.remove_dead_ends else 'kept'}"
                f"  winding:{cfg.winding_percent}"
            )
            pygame.display.flip()
            dirty = False
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
