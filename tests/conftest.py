from pathlib import Path

import pytest


def cube_text(dims, values, natoms=1, per_line=6):
    nx, ny, nz = dims
    lines = [
        "DelPhi potential map",
        "OUTER LOOP: X, MIDDLE LOOP: Y, INNER LOOP: Z",
        f"{natoms:5d}    0.000000    0.000000    0.000000",
        f"{nx:5d}    0.500000    0.000000    0.000000",
        f"{ny:5d}    0.000000    0.500000    0.000000",
        f"{nz:5d}    0.000000    0.000000    0.500000",
    ]
    for k in range(natoms):
        lines.append(f"    6    0.000000    {k:.6f}    1.000000    2.000000")
    vals = [f"{v: .5E}" for v in values]
    for start in range(0, len(vals), per_line):
        lines.append(" ".join(vals[start:start + per_line]))
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_cube(tmp_path):
    def _write(name, dims, values, natoms=1, per_line=6) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(cube_text(dims, values, natoms=natoms, per_line=per_line))
        return p

    return _write
