from __future__ import annotations

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .matrix import DistanceMatrix


def plot_matrix(mat: DistanceMatrix, out_png: str, cmap: str = "viridis") -> None:
    df = mat.to_frame()
    size = max(4.0, 0.5 * mat.n + 2.0)
    fig, ax = plt.subplots(figsize=(size, size))
    im = ax.imshow(np.ma.masked_invalid(df.to_numpy()), cmap=cmap)
    ax.set_xticks(range(mat.n))
    ax.set_yticks(range(mat.n))
    ax.set_xticklabels(mat.labels, rotation=90)
    ax.set_yticklabels(mat.labels)
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("RMSD")
    ax.set_title("Electrostatic map distances")
    fig.tight_layout()
    fig.savefig(out_png, dpi=200)
    plt.close(fig)
