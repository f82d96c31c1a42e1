#!/usr/bin/env python3
# Render maze TSV grids (or freshly generated mazes) to PNGs using Pillow.

import argparse, logging, os

from mazegen.mapgen.generator import generate_level
from mazegen.mapgen.placement import pick_spawns
from mazegen.render.image import save_png
from mazegen.rng import PMRandom


def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    if not rows or any(len(r) != len(rows) for r in rows):
        raise SystemExit(f"{path}: expected a square grid.")
    return rows


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("tsv", nargs="*", help="TSV files to render")
    ap.add_argument("--seed", type=int, help="Generate instead of reading TSVs")
    ap.add_argument("--levels", type=int, default=1, help="Levels to generate with --seed")
    ap.add_argument("--spawns", action="store_true", help="Mark player/monster/pickup spawns (--seed only)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.seed is None and not args.tsv:
        ap.error("give TSV files or --seed")

    for path in args.tsv:
        png = os.path.join(args.outdir, os.path.splitext(os.path.basename(path))[0] + ".png")
        save_png(read_tsv(path), png, tile_size=args.tile)
        print(f"Wrote {png}")

    if args.seed is not None:
        for lvl in range(1, args.levels + 1):
            maze = generate_level(args.seed, lvl)
            markers = []
            if args.spawns:
                s = pick_spawns(maze, PMRandom(args.seed + lvl))
                markers = [s.player.pos, s.monster.pos, s.pickup.pos]
            png = os.path.join(args.outdir, str(args.seed), f"{lvl:02d}.png")
            save_png(maze.as_matrix(), png, tile_size=args.tile, markers=markers)
            print(f"Wrote {png}")


if __name__ == "__main__":
    main()
