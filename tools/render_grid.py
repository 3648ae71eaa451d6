#!/usr/bin/env python3
# Preview TSV maze fixtures (1 = wall, 0 = passage) as PNGs using Pillow.
# Development aid for eyeballing golden packs; not part of the library.

import argparse, os
from PIL import Image, ImageDraw

WALL_COLOR = (80, 80, 80, 255)
PASSAGE_COLOR = (235, 235, 220, 255)
START_COLOR = (0, 200, 0, 255)

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

def render_grid(tsv_path, out_png, cell_size=16, margin=0):
    rows = read_tsv(tsv_path)
    n = len(rows)
    side = n * cell_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(rows):
        for x, wall in enumerate(row):
            if (x, y) == (1, 1) and not wall:
                color = START_COLOR
            else:
                color = WALL_COLOR if wall else PASSAGE_COLOR
            x0 = margin + x * cell_size
            y0 = margin + y * cell_size
            draw.rectangle((x0, y0, x0 + cell_size - 1, y0 + cell_size - 1), fill=color)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, required=True, help="Golden pack name (e.g., abc)")
    ap.add_argument("--indir", type=str, default="data/golden_mazes", help="Directory containing TSVs")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--cell", type=int, default=16, help="Cell size in pixels")
    args = ap.parse_args(argv)

    seed_dir = os.path.join(args.indir, args.seed)
    for name in sorted(os.listdir(seed_dir)):
        if not name.endswith(".tsv"):
            continue
        png = os.path.join(args.outdir, args.seed, name[:-4] + ".png")
        render_grid(os.path.join(seed_dir, name), png, cell_size=args.cell)
    print(f"Wrote PNGs to {os.path.join(args.outdir, args.seed)}")

if __name__ == "__main__":
    main()
