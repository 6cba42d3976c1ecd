from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from scipy.ndimage import map_coordinates

from .cube import Volume


def resample_array(samples: np.ndarray, dims: Sequence[int]) -> np.ndarray:
    """
    Trilinear resize of a 3-D array to `dims`.

    Each output axis of length m samples the input axis of length n at
    linspace(0, n-1, m), so first and last grid points coincide on both grids.
    No physical spacing is taken into account. Image resizers that align outer
    pixel edges instead give slightly different values.
    """
    target: Tuple[int, ...] = tuple(int(d) for d in dims)
    if len(target) != samples.ndim or any(d <= 0 for d in target):
        raise ValueError(f"Invalid target dimensions {tuple(dims)} for array of shape {samples.shape}")
    axes = [np.linspace(0.0, n_in - 1, n_out) for n_in, n_out in zip(samples.shape, target)]
    coords = np.meshgrid(*axes, indexing="ij")
    return map_coordinates(samples, coords, order=1, mode="nearest")


def resample(volume: Volume, dims: Sequence[int]) -> Volume:
    return Volume(
        header=volume.header,
        dims=tuple(int(d) for d in dims),
        samples=resample_array(volume.samples, dims),
        natoms=volume.natoms,
    )
