from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import __version__
from .errors import CubeDistError
from .pipeline import DEFAULT_OUTPUT, RunConfig, run

logger = logging.getLogger("cubedist")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="cubedist",
        description=(
            "Calculate the pairwise distances (rmsd) between a set of electrostatic maps, "
            "contained in Gaussian cube files, and report these distances in CSV and "
            "MEGA-compatible formats."
        ),
    )
    p.add_argument("map", nargs=argparse.ONE_OR_MORE, help="Electrostatic potential maps (cube files)")
    p.add_argument("--output", "-o", default=DEFAULT_OUTPUT, help="Output files base name")
    p.add_argument("--workers", "-j", type=int, default=1, help="Threads used to compute pair distances")
    p.add_argument("--plot", action="store_true", help="Also write a heatmap of the matrix (<output>.png)")
    p.add_argument("--write-config", action="store_true", help="Also write the run parameters (<output>.json)")
    p.add_argument("--verbose", "-v", action="count", default=0)
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = p.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    cfg = RunConfig(workers=args.workers, plot=args.plot, write_config=args.write_config)
    try:
        result = run(args.map, output=args.output, config=cfg)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except CubeDistError as exc:
        logger.error("%s", exc)
        return 1

    written = [result[k] for k in ("csv", "meg", "png", "json") if k in result]
    print("Wrote: " + "\n".join(written))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
