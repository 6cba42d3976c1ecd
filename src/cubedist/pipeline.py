from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence

from . import matrix as matrix_mod
from . import writers

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "map_distances_rmsd"


@dataclass
class RunConfig:
    workers: int = 1
    plot: bool = False
    write_config: bool = False


def run(
    paths: Sequence[str | os.PathLike],
    output: str | os.PathLike = DEFAULT_OUTPUT,
    config: Optional[RunConfig] = None,
) -> Dict[str, object]:
    """
    Compute the distance matrix for `paths` and write `<output>.csv` and `<output>.meg`.

    Returns a dict with keys:
    - matrix: the DistanceMatrix
    - csv, meg: paths of the written files
    - png, json: only present when requested in `config`

    Output files are created only once every distance has been computed.
    """
    config = config or RunConfig()
    mat = matrix_mod.build_matrix(paths, workers=config.workers)

    base = Path(output)
    base.parent.mkdir(parents=True, exist_ok=True)
    csv_path = base.with_name(base.name + ".csv")
    meg_path = base.with_name(base.name + ".meg")
    writers.write_csv(csv_path, mat)
    writers.write_meg(meg_path, mat)
    logger.info("Wrote %s and %s", csv_path, meg_path)
    result: Dict[str, object] = {"matrix": mat, "csv": str(csv_path), "meg": str(meg_path)}

    if config.plot:
        from .plotting import plot_matrix

        png_path = base.with_name(base.name + ".png")
        plot_matrix(mat, str(png_path))
        result["png"] = str(png_path)

    if config.write_config:
        json_path = base.with_name(base.name + ".json")
        with open(json_path, "w") as f:
            json.dump(
                {
                    "run": asdict(config),
                    "maps": mat.paths,
                    "labels": mat.labels,
                    "output": str(base),
                },
                f,
                indent=2,
            )
        result["json"] = str(json_path)

    return result
