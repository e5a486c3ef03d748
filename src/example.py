"""
Module with example code for consolidating QCA solutions.

There are two ways to run the code:

1. Consolidate solution objects defined via code (a multi-model conservative
    solution, a single-model parsimonious solution and two intermediate CnPn variants).
2. Consolidate solution objects exported from R to JSON files.

Usage via cli:
    python3 -m src.example --option 1
    python3 -m src.example --option 2 --c cons.json --i int.json --icp C1P1 --save out.xlsx
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from qca_solutions import from_mapping, load_solution, qca_solutions


def _bundle(
    pis: dict[str, tuple[float, float, float, float]], sol: tuple[float, ...]
) -> dict:
    """Build one R-shaped model bundle from (inclS, PRI, covS, covU) per PI."""
    return {
        "incl.cov": {
            pi: {"inclS": a, "PRI": b, "covS": c, "covU": d}
            for pi, (a, b, c, d) in pis.items()
        },
        "sol.incl.cov": {"inclS": sol[0], "PRI": sol[1], "covS": sol[2]},
    }


def _pims(pis: list[str]) -> dict[str, dict[str, float]]:
    cases = ["AT", "BE", "DK", "FR", "NL"]
    scores = [0.9, 0.2, 0.6, 0.5, 0.1]
    return {
        case: {pi: round((score + k * 0.15) % 1.0, 2) for k, pi in enumerate(pis)}
        for case, score in zip(cases, scores)
    }


def example_objects() -> dict[str, object]:
    m1 = _bundle(
        {"A*B": (0.92, 0.88, 0.41, 0.12), "A*~C": (0.81, 0.74, 0.35, 0.09)},
        (0.87, 0.80, 0.55),
    )
    m1["pims"] = _pims(["A*B", "A*~C"])
    m2 = _bundle(
        {"A*B": (0.92, 0.88, 0.41, 0.20), "B*D": (0.77, 0.70, 0.30, 0.10)},
        (0.84, 0.78, 0.52),
    )
    m2["pims"] = _pims(["A*B", "B*D"])
    conservative = {"IC": {"individual": [m1, m2]}}

    pars_ic = _bundle({"A": (0.85, 0.79, 0.62, 0.62)}, (0.85, 0.79, 0.62))
    parsimonious = {"IC": pars_ic, "pims": _pims(["A"])}

    c1p1 = _bundle({"A*B": (0.92, 0.88, 0.41, 0.41)}, (0.92, 0.88, 0.41))
    c1p1["incl.cov"]["A*B"]["cases"] = ["AT", "DK"]
    c2p2 = _bundle({"A*~C": (0.81, 0.74, 0.35, 0.35)}, (0.81, 0.74, 0.35))
    intermediate = {
        "i.sol": {
            "C1P1": {"IC": c1p1},
            "C2P2": {"IC": c2p2, "pims": _pims(["A*~C"])},
        }
    }
    return {"c": conservative, "p": parsimonious, "i": intermediate}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run QCA solution consolidation examples.")
    parser.add_argument(
        "--option",
        type=int,
        default=1,
        choices=(1, 2),
        help="Example scenario to run (default: 1).",
    )
    parser.add_argument("--c", type=Path, help="Conservative solution JSON file.")
    parser.add_argument("--i", type=Path, help="Intermediate solution JSON file.")
    parser.add_argument("--p", type=Path, help="Parsimonious solution JSON file.")
    parser.add_argument(
        "--icp", nargs="+", default=None, help="CnPn labels of the intermediate solution."
    )
    parser.add_argument("--save", type=Path, default=None, help="Output .xlsx path.")
    parser.add_argument("--round", type=int, default=None, help="Decimal places.")
    parser.add_argument(
        "--incl-cut", type=float, default=None, help="Consistency_PI threshold."
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress notices.")
    return parser.parse_args()


def run_option(args: argparse.Namespace) -> pd.DataFrame:
    print(f"Running example code with option {args.option}")

    # Solution objects defined via code, in the nested layout of the R QCA package.
    if args.option == 1:
        objs = example_objects()
        result = qca_solutions(
            c=from_mapping(objs["c"]),
            i=from_mapping(objs["i"]),
            icp=args.icp or ["C1P1", "C2P2"],
            p=from_mapping(objs["p"]),
            verbose=not args.quiet,
            save=args.save,
            round=args.round if args.round is not None else 2,
            incl_cut=args.incl_cut,
        )

    # Solution objects exported to JSON. Typical production use.
    elif args.option == 2:
        result = qca_solutions(
            c=load_solution(args.c) if args.c else None,
            i=load_solution(args.i) if args.i else None,
            icp=args.icp,
            p=load_solution(args.p) if args.p else None,
            verbose=not args.quiet,
            save=args.save,
            round=args.round,
            incl_cut=args.incl_cut,
        )
    else:
        raise SystemExit(f"Unknown option {args.option}")

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(result)
    return result


def main() -> None:
    run_option(parse_args())


if __name__ == "__main__":
    main()
