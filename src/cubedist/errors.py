from __future__ import annotations


class CubeDistError(ValueError):
    """Base class for fatal conditions raised while building a distance matrix."""


class ParseError(CubeDistError):
    """A cube file header (or sample stream) could not be read."""


class DimensionMismatchError(CubeDistError):
    def __init__(self, path: str, expected: int, found: int) -> None:
        self.path = str(path)
        self.expected = expected
        self.found = found
        super().__init__(
            f"Number of voxels read from {self.path} ({found}) does not "
            f"correspond with map dimensions ({expected})."
        )


class InsufficientInputError(CubeDistError):
    """Fewer than two distinct maps were supplied."""
