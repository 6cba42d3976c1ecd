from __future__ import annotations

from typing import Callable

import numpy as np

from .cube import Volume
from . import resample as resample_mod

Resampler = Callable[[Volume, tuple], Volume]
RMSDFunction = Callable[[np.ndarray, np.ndarray], float]


def rmsd(a, b) -> float:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Cannot compute RMSD between arrays of shape {a.shape} and {b.shape}")
    return float(np.sqrt(np.mean((a - b) ** 2)))


def distance(
    map1: Volume,
    map2: Volume,
    resampler: Resampler | None = None,
    rmsd_fn: RMSDFunction | None = None,
) -> float:
    """
    RMSD between two potential maps.

    Maps on different grids are compared both ways (map2 resampled onto map1's
    grid and map1 onto map2's) and the two RMSDs are averaged, so the result
    does not depend on argument order.
    """
    resampler = resampler or resample_mod.resample
    rmsd_fn = rmsd_fn or rmsd
    if map1.dims == map2.dims:
        return rmsd_fn(map1.samples, map2.samples)
    rmsd1 = rmsd_fn(map1.samples, resampler(map2, map1.dims).samples)
    rmsd2 = rmsd_fn(map2.samples, resampler(map1, map2.dims).samples)
    return (rmsd1 + rmsd2) / 2
