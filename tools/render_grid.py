#!/usr/bin/env python3
# Render text dumps (or freshly generated seeds) to PNGs using Pillow.
# Entity markers are drawn over a floor cell, matching what a scene builder
# has to do with the grid.

import argparse, os
from PIL import Image, ImageDraw

from mazegen.grid import Grid
from mazegen.mapgen.generator import generate_grid
from mazegen.render.palette import COLORS
from mazegen.tiles import MARKERS, Tile

def read_dump(path):
    with open(path, encoding="utf-8") as f:
        return Grid.from_dump(f.read())

def render_image(grid, tile_size=8, margin=0):
    w = grid.width * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    inset = max(1, tile_size // 8)
    for y in range(grid.height):
        for x in range(grid.width):
            t = grid.get(x, y)
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
            if t in MARKERS:
                draw.rectangle(box, fill=COLORS[Tile.FLOOR])
                draw.ellipse((x0 + inset, y0 + inset, x0 + tile_size - 1 - inset, y0 + tile_size - 1 - inset),
                             fill=COLORS[t])
            else:
                draw.rectangle(box, fill=COLORS[t])
    return canvas

def render_grid(grid, out_png, tile_size=8, margin=0):
    canvas = render_image(grid, tile_size=tile_size, margin=margin)
    outdir = os.path.dirname(out_png)
    if outdir:
        os.makedirs(outdir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--dump", type=str, help="Text dump written by mazetool.py dump")
    src.add_argument("--seed", type=int, help="Generate a fresh 51x51 dungeon from this seed")
    ap.add_argument("--out", type=str, required=True, help="PNG path to write")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    args = ap.parse_args()

    grid = read_dump(args.dump) if args.dump else generate_grid(args.seed)
    render_grid(grid, args.out, tile_size=args.tile)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
