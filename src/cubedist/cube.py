from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import numpy as np

from .errors import DimensionMismatchError, ParseError

logger = logging.getLogger(__name__)

# Lines 1-2 are comments, line 3 holds the atom count, lines 4-6 the grid extents.
_FIXED_HEADER_LINES = 6


@dataclass(frozen=True, eq=False)
class Volume:
    header: str
    dims: Tuple[int, int, int]
    samples: np.ndarray = field(repr=False)
    natoms: int = 0

    def __post_init__(self) -> None:
        dims = tuple(int(n) for n in self.dims)
        samples = np.asarray(self.samples, dtype=np.float64)
        expected = int(np.prod(dims))
        if samples.size != expected:
            raise DimensionMismatchError("<volume>", expected, int(samples.size))
        object.__setattr__(self, "dims", dims)
        object.__setattr__(self, "samples", samples.reshape(dims))


def map_label(path: str | os.PathLike) -> str:
    """Display name of a map: file name without directory or extension."""
    return Path(path).stem


def _first_int(line: str, lineno: int, what: str, path: str | os.PathLike) -> int:
    parts = line.split()
    if not parts:
        raise ParseError(f"{path}: line {lineno} is empty, expected {what}")
    try:
        return int(parts[0])
    except ValueError:
        raise ParseError(f"{path}: line {lineno}: {parts[0]!r} is not a valid {what}") from None


def parse_cube(path: str | os.PathLike) -> Volume:
    """
    Parse a Gaussian cube potential map (e.g. a DelPhi/APBS phimap).

    Header layout:
      1-2     comments
      3       natoms, origin
      4-6     n{x,y,z} and axis vector
      natoms  atom records
    followed by nx*ny*nz samples, whitespace separated, in x-slowest/z-fastest order.
    """
    header_lines: List[str] = []
    tokens: List[str] = []
    natoms = 0
    extents = [0, 0, 0]
    try:
        with open(path, "r") as f:
            for lineno, line in enumerate(f, start=1):
                if lineno <= _FIXED_HEADER_LINES + natoms:
                    header_lines.append(line.rstrip("\n") + "\n")
                    if lineno == 3:
                        natoms = _first_int(line, lineno, "atom count", path)
                        if natoms < 0:
                            raise ParseError(f"{path}: negative atom count {natoms} is not supported")
                    elif 4 <= lineno <= 6:
                        n = _first_int(line, lineno, "grid extent", path)
                        if n <= 0:
                            raise ParseError(f"{path}: line {lineno}: grid extent must be positive, got {n}")
                        extents[lineno - 4] = n
                else:
                    tokens.extend(line.split())
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: not a text cube file ({exc})") from None

    if len(header_lines) < _FIXED_HEADER_LINES + natoms:
        raise ParseError(
            f"{path}: file ended after {len(header_lines)} lines, "
            f"header needs {_FIXED_HEADER_LINES + natoms}"
        )

    dims = (extents[0], extents[1], extents[2])
    expected = dims[0] * dims[1] * dims[2]
    if len(tokens) != expected:
        raise DimensionMismatchError(str(path), expected, len(tokens))
    try:
        voxels = np.array(tokens, dtype=np.float64)
    except ValueError as exc:
        raise ParseError(f"{path}: non-numeric sample value ({exc})") from None

    logger.debug("Parsed %s: dims=%s natoms=%d", path, dims, natoms)
    return Volume(
        header="".join(header_lines),
        dims=dims,
        samples=voxels.reshape(dims),
        natoms=natoms,
    )
