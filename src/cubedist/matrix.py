from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np
import pandas as pd

from . import cube as cube_mod
from . import distance as distance_mod
from .errors import InsufficientInputError

logger = logging.getLogger(__name__)


@dataclass
class DistanceMatrix:
    paths: List[str]
    values: np.ndarray = field(repr=False)
    labels: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.labels:
            self.labels = [cube_mod.map_label(p) for p in self.paths]
        n = len(self.paths)
        if self.values.shape != (n, n) or len(self.labels) != n:
            raise ValueError(f"Matrix shape {self.values.shape} does not match {n} maps")

    @property
    def n(self) -> int:
        return len(self.paths)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Lower-triangle cells (row > column), row by row."""
        for i in range(self.n):
            for j in range(i):
                yield i, j

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with NaN on the diagonal and upper triangle."""
        lower = np.tril(np.ones((self.n, self.n), dtype=bool), k=-1)
        df = pd.DataFrame(
            np.where(lower, self.values, np.nan),
            index=pd.Index(self.labels, name="maps"),
            columns=self.labels,
        )
        return df


def unique_paths(paths: Iterable[str | os.PathLike]) -> List[str]:
    """Drop repeated paths (exact string match), keeping first occurrences in order."""
    return list(dict.fromkeys(str(p) for p in paths))


def _pair_distance(path_i: str, path_j: str) -> float:
    for p in (path_i, path_j):
        if not Path(p).is_file():
            raise FileNotFoundError(f"{p} does not correspond with a real file.")
    cube_i = cube_mod.parse_cube(path_i)
    cube_j = cube_mod.parse_cube(path_j)
    return distance_mod.distance(cube_i, cube_j)


def build_matrix(paths: Sequence[str | os.PathLike], workers: int = 1) -> DistanceMatrix:
    """
    Compute the lower-triangular RMSD matrix over the distinct maps in `paths`.

    Every pair is parsed afresh. Any missing file or malformed map aborts the
    whole computation; nothing is returned partially filled.
    """
    unique = unique_paths(paths)
    n = len(unique)
    if n < 2:
        raise InsufficientInputError("At least two distinct files are required.")

    mat = DistanceMatrix(paths=unique, values=np.zeros((n, n)))
    pairs = list(mat.pairs())
    logger.info("Computing %d distances between %d maps", len(pairs), n)

    if workers <= 1:
        for i, j in pairs:
            mat.values[i, j] = _pair_distance(unique[i], unique[j])
            logger.info("%s vs %s: %.6g", mat.labels[i], mat.labels[j], mat.values[i, j])
        return mat

    with ThreadPoolExecutor(max_workers=int(workers)) as ex:
        futs = {ex.submit(_pair_distance, unique[i], unique[j]): (i, j) for i, j in pairs}
        try:
            for fut in as_completed(futs):
                i, j = futs[fut]
                mat.values[i, j] = fut.result()
                logger.info("%s vs %s: %.6g", mat.labels[i], mat.labels[j], mat.values[i, j])
        except BaseException:
            # pairs not yet started are dropped; running ones finish before the error propagates
            ex.shutdown(wait=False, cancel_futures=True)
            raise
    return mat
