#!/usr/bin/env python3
import argparse, csv, logging, os
from mazegen.config import MazeParams
from mazegen.mapgen.generator import generate_grid


def write_tsv(mat, path, include_header=False):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)


def add_param_args(p):
    d = MazeParams()
    p.add_argument('--size', type=int, default=d.size)
    p.add_argument('--rooms', type=int, default=d.rooms)
    p.add_argument('--room-min', type=int, default=d.room_size_min)
    p.add_argument('--room-max', type=int, default=d.room_size_max)
    p.add_argument('--path-max', type=int, default=d.path_length_max)
    p.add_argument('--straightness', type=float, default=d.path_straightness)
    p.add_argument('--cluster-min', type=int, default=d.cluster_size_min)
    p.add_argument('--dead-ends', type=int, default=d.dead_end_reduction)
    p.add_argument('--holes', type=float, default=d.hole_density)


def params_from_args(args) -> MazeParams:
    return MazeParams(
        size=args.size, rooms=args.rooms,
        room_size_min=args.room_min, room_size_max=args.room_max,
        path_length_max=args.path_max, path_straightness=args.straightness,
        cluster_size_min=args.cluster_min, dead_end_reduction=args.dead_ends,
        hole_density=args.holes,
    )


def cmd_emit(args):
    mat = generate_grid(args.seed, args.level, params_from_args(args))
    write_tsv(mat, args.out, include_header=args.header)
    print(f"Wrote {args.out}")


def cmd_golden(args):
    base = os.path.join(args.outdir, str(args.seed))
    params = params_from_args(args)
    for lvl in range(1, args.levels + 1):
        mat = generate_grid(args.seed, lvl, params)
        write_tsv(mat, os.path.join(base, f"{lvl:02d}.tsv"))
    print(f"Wrote {args.levels} levels to {base}")


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--level', type=int, default=1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    add_param_args(p1)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seed', type=int, required=True)
    p2.add_argument('--levels', type=int, default=10)
    p2.add_argument('--outdir', type=str, required=True)
    add_param_args(p2)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == '__main__':
    main()
