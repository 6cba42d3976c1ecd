from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .matrix import DistanceMatrix

MEG_TITLE = "Electrostatic map distances"
MEG_DESCRIPTION = "Distance (rmsd) between electrostatic maps calculated with cubedist"
CELL_WIDTH = 9


def write_csv(out_path: str | os.PathLike, mat: DistanceMatrix) -> None:
    """
    Write the lower triangle as CSV: a `maps` header row with every label,
    then one row per map. Cells on or above the diagonal are left empty.

    Labels containing a comma or a quote are quoted following RFC 4180
    (`m,x.cube` is written as `"m,x"`) so the file stays readable by CSV parsers.
    """
    mat.to_frame().to_csv(out_path, na_rep="", lineterminator="\n")


def format_meg(mat: DistanceMatrix) -> str:
    """Render the matrix as a MEGA distance file (lower-left layout)."""
    lines: List[str] = [
        "#mega",
        f"!Title: {MEG_TITLE};",
        f"!Format DataType=Distance DataFormat=LowerLeft NTaxa={mat.n};",
        "!Description",
        f"\t{MEG_DESCRIPTION}",
        ";",
        "",
    ]
    for i, label in enumerate(mat.labels, start=1):
        lines.append(f"[{i}] #{label}")
    lines.append("")

    lines.append("[     " + "".join(f"{i:{CELL_WIDTH}d}" for i in range(1, mat.n + 1)) + "  ]")
    for i in range(mat.n):
        cells = []
        for j in range(mat.n):
            if i > j:
                cells.append(f"{mat.values[i, j]:{CELL_WIDTH}.3g}")
            else:
                cells.append(" " * CELL_WIDTH)
        lines.append(f"[{i + 1}]   " + "".join(cells))
    return "\n".join(lines) + "\n"


def write_meg(out_path: str | os.PathLike, mat: DistanceMatrix) -> None:
    Path(out_path).write_text(format_meg(mat))
