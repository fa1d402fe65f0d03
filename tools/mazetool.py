#!/usr/bin/env python3
import argparse, csv, logging, os, sys
from mazegen.config import DEFAULTS, GeneratorConfig
from mazegen.mapgen.generator import Generator, count_tiles
from mazegen.mapgen.regions import label_regions
from mazegen.tiles import Tile

def add_generator_args(p):
    p.add_argument('--seed', type=int, required=True)
    p.add_argument('--width', type=int, default=DEFAULTS.width)
    p.add_argument('--height', type=int, default=DEFAULTS.height)
    p.add_argument('--rooms', type=int, default=DEFAULTS.room_tries, help='Room placement tries')
    p.add_argument('--room-extra-size', type=int, default=DEFAULTS.room_extra_size)
    p.add_argument('--extra-connector-chance', type=int, default=DEFAULTS.extra_connector_chance)
    p.add_argument('--winding', type=int, default=DEFAULTS.winding_percent, help='Winding percent (0..100)')
    p.add_argument('--keep-dead-ends', action='store_true')
    p.add_argument('--enemies', type=int, default=DEFAULTS.enemy_count)
    p.add_argument('--ensure-connected', action='store_true')
    p.add_argument('--round-odd', action='store_true', help='Bump even sizes to the next odd value')

def config_from_args(args):
    cfg = GeneratorConfig(
        width=args.width,
        height=args.height,
        room_tries=args.rooms,
        room_extra_size=args.room_extra_size,
        extra_connector_chance=args.extra_connector_chance,
        winding_percent=args.winding,
        remove_dead_ends=not args.keep_dead_ends,
        enemy_count=args.enemies,
        ensure_connected=args.ensure_connected,
    )
    return cfg.round_up_odd() if args.round_odd else cfg

def build(args, seed=None):
    gen = Generator.from_config(config_from_args(args), seed=args.seed if seed is None else seed)
    return gen.generate()

def write_tsv(grid, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for row in grid.rows():
            w.writerow([t.char for t in row])

def cmd_dump(args):
    grid = build(args)
    text = grid.dump() + "\n"
    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"Wrote {args.out}")
    else:
        sys.stdout.write(text)
    if args.stats:
        counts = count_tiles(grid)
        start = grid.first(Tile.PLAYER)
        stats = [f"{t.name.lower()}={n}" for t, n in counts.items()]
        stats.append(f"regions={label_regions(grid.thaw()).count}")
        stats.append("start=" + (f"{start[0]},{start[1]}" if start else "none"))
        print(" ".join(stats))

def cmd_emit(args):
    write_tsv(build(args), args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.seed, args.seed + args.count):
        path = os.path.join(args.outdir, f"{seed:06d}.txt")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(build(args, seed).dump() + "\n")
    print(f"Wrote {args.count} dumps to {args.outdir}")

def main(argv=None):
    p = argparse.ArgumentParser(prog='mazetool')
    p.add_argument('--log-level', default='WARNING', help='DEBUG shows per-phase counts and the layout')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('dump', help='Print the text dump of one dungeon')
    add_generator_args(p1)
    p1.add_argument('--out', type=str, default=None)
    p1.add_argument('--stats', action='store_true', help='Also print tile counts')
    p1.set_defaults(func=cmd_dump)
    p2 = sub.add_parser('emit', help='Write one dungeon as tab-separated tile characters')
    add_generator_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_emit)
    p3 = sub.add_parser('golden', help='Write text dumps for a run of consecutive seeds')
    add_generator_args(p3)
    p3.add_argument('--count', type=int, default=10)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
