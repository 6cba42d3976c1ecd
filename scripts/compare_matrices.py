#!/usr/bin/env python3
from __future__ import annotations

import argparse
import numpy as np
import pandas as pd


def main():
    ap = argparse.ArgumentParser(description="RMSD between two cubedist matrix CSVs over the map pairs they share")
    ap.add_argument("--a-csv", required=True)
    ap.add_argument("--b-csv", required=True)
    args = ap.parse_args()

    a = pd.read_csv(args.a_csv, index_col="maps").stack().dropna().rename("a")
    b = pd.read_csv(args.b_csv, index_col="maps").stack().dropna().rename("b")
    merged = pd.concat([a, b], axis=1, join="inner")
    if merged.empty:
        print("No shared map pairs")
        return
    r = float(np.sqrt(((merged["a"] - merged["b"]) ** 2).mean()))
    print(f"RMSD: {r:.4g} over {len(merged)} pairs")


if __name__ == "__main__":
    main()
