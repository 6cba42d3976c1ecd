"""
cubedist: pairwise RMSD between electrostatic potential maps (Gaussian cube files).

Exposes key abstractions:
- parse_cube: read a cube file into a validated Volume
- build_matrix: lower-triangular distance matrix over a set of maps
- run: orchestrate matrix building and CSV/MEG output

The distance and resampling primitives live in cubedist.distance and
cubedist.resample.
"""

__version__ = "1.0.0"

from .cube import Volume, map_label, parse_cube
from .errors import CubeDistError, DimensionMismatchError, InsufficientInputError, ParseError
from .matrix import DistanceMatrix, build_matrix, unique_paths
from .pipeline import RunConfig, run

__all__ = [
    "Volume",
    "parse_cube",
    "map_label",
    "DistanceMatrix",
    "build_matrix",
    "unique_paths",
    "RunConfig",
    "run",
    "CubeDistError",
    "ParseError",
    "DimensionMismatchError",
    "InsufficientInputError",
]
