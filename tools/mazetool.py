#!/usr/bin/env python3
import argparse, csv, os
from labyrinth.mapgen.generator import generate_square_maze

def write_tsv(grid, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t', lineterminator='\n')
        if include_header:
            w.writerow(list(range(grid.dimension)))
        for row in grid.as_rows():
            w.writerow([int(c) for c in row])

def _seed(args):
    return int(args.seed) if args.numeric else args.seed

def cmd_emit(args):
    grid = generate_square_maze(args.dimension, _seed(args))
    write_tsv(grid, args.out, include_header=args.header)
    print(f"Wrote {args.out} (seed {grid.seed})")

def cmd_golden(args):
    base = os.path.join(args.outdir, args.seed)
    os.makedirs(base, exist_ok=True)
    for dim in args.dimensions:
        grid = generate_square_maze(dim, _seed(args))
        write_tsv(grid, os.path.join(base, f"{dim:02d}.tsv"))
    print(f"Wrote golden pack to {base}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Emit seeded mazes as TSV (1 = wall, 0 = passage).")
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=str, required=True)
    p1.add_argument('--numeric', action='store_true', help="treat --seed as a raw integer seed")
    p1.add_argument('--dimension', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seed', type=str, required=True)
    p2.add_argument('--numeric', action='store_true', help="treat --seed as a raw integer seed")
    p2.add_argument('--outdir', type=str, required=True)
    p2.add_argument('--dimensions', type=int, nargs='+', default=[5, 7, 9, 11, 15, 21])
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args(argv)
    args.func(args)

if __name__ == '__main__':
    main()
