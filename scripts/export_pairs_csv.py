#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path
import pandas as pd


def matrix_csv_to_pairs(path: str) -> pd.DataFrame:
    mat = pd.read_csv(path, index_col="maps")
    pairs = mat.stack().dropna().reset_index()
    pairs.columns = ["map_a", "map_b", "rmsd"]
    return pairs.sort_values("rmsd").reset_index(drop=True)


def main():
    ap = argparse.ArgumentParser(description="Export a cubedist matrix CSV as one row per map pair")
    ap.add_argument("--matrix-csv", required=True)
    ap.add_argument("--out-csv", required=True)
    args = ap.parse_args()

    df = matrix_csv_to_pairs(args.matrix_csv)
    Path(args.out_csv).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.out_csv, index=False)
    print(f"Wrote {args.out_csv} with {len(df)} rows")


if __name__ == "__main__":
    main()
