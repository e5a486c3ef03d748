from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

import pandas as pd

from qca_solutions.cases import construct_cases
from qca_solutions.config import ConsolidationOptions, PathArg
from qca_solutions.errors import (
    InvalidInputError,
    MissingParameterError,
    UnknownLabelError,
)
from qca_solutions.export import ensure_writer_available, write_table
from qca_solutions.progress import ProgressNotices
from qca_solutions.rows import NUMERIC_COLUMNS, build_rows, empty_table
from qca_solutions.solution import (
    ModelStats,
    MultiModel,
    QCAMin,
    SingleModel,
    SolutionShape,
)

MISSING = "-"


def qca_solutions(
    c: Optional[QCAMin] = None,
    i: Optional[QCAMin] = None,
    icp: Optional[Sequence[str] | str] = None,
    p: Optional[QCAMin] = None,
    verbose: bool = True,
    save: Optional[PathArg] = None,
    round: Optional[int] = None,
    incl_cut: Optional[float] = None,
    *,
    progress: ProgressNotices | None = None,
) -> pd.DataFrame:
    """
    Consolidate conservative, intermediate and parsimonious QCA solutions into one table.

    Parameters
    ----------
    c, p:
        Conservative / parsimonious minimization results. Omitted results are skipped.
    i:
        Intermediate minimization result, holding one solution per CnPn label.
    icp:
        CnPn labels of `i` to include, in output order. Required when `i` is given.
    verbose:
        Print progress notices.
    save:
        Optional .xlsx path; the returned table is written there after post-processing.
    round:
        Optional number of decimal places for the numeric columns (round half to even).
    incl_cut:
        Optional threshold; only prime implicants with Consistency_PI >= incl_cut are kept.

    Returns
    -------
    pd.DataFrame
        One row per (solution type, model, prime implicant), missing values shown as "-".
    """
    options = ConsolidationOptions(
        verbose=verbose, save=save, round=round, incl_cut=incl_cut
    )
    return consolidate(c=c, i=i, p=p, icp=icp, options=options, progress=progress)


def consolidate(
    c: Optional[QCAMin] = None,
    i: Optional[QCAMin] = None,
    p: Optional[QCAMin] = None,
    *,
    icp: Optional[Sequence[str] | str] = None,
    options: ConsolidationOptions | None = None,
    progress: ProgressNotices | None = None,
) -> pd.DataFrame:
    """Options-object variant of `qca_solutions`."""
    opts = options or ConsolidationOptions()
    notices = progress or ProgressNotices(opts.verbose)

    notices.notice("Validating inputs...")
    opts.validate()
    labels = _validate_inputs(c, i, p, icp)
    if opts.save is not None:
        ensure_writer_available()

    frames: list[pd.DataFrame] = []
    if c is not None:
        notices.processing("Conservative")
        frames.extend(
            _solution_frames(_require_solution(c, "c"), "Conservative", opts.incl_cut)
        )
    if p is not None:
        notices.processing("Parsimonious")
        frames.extend(
            _solution_frames(_require_solution(p, "p"), "Parsimonious", opts.incl_cut)
        )
    if i is not None:
        notices.processing("Intermediate")
        for cnpn in labels:
            frames.extend(
                _solution_frames(
                    i.i_sol[cnpn], "Intermediate", opts.incl_cut, cnpn=cnpn
                )
            )

    final_df = _post_process(frames, opts.round)

    if opts.save is not None:
        notices.saving(opts.save)
        write_table(final_df, opts.save)

    notices.done()
    return final_df


# ---------- validation ----------


def _validate_inputs(
    c: Any, i: Any, p: Any, icp: Optional[Sequence[str] | str]
) -> list[str]:
    """Check every argument up front; return the CnPn labels to process."""
    for obj, name in ((c, "c"), (i, "i"), (p, "p")):
        if obj is not None and not isinstance(obj, QCAMin):
            raise InvalidInputError(name)
    for obj, name in ((c, "c"), (p, "p")):
        if obj is not None:
            _require_solution(obj, name)

    if i is None:
        return []

    if isinstance(icp, str):
        icp = [icp]
    if not icp:
        raise MissingParameterError(
            "You must specify which CnPn to include for intermediate solutions (icp)."
        )
    labels = [str(label) for label in icp]
    known = set(i.cnpn_labels)
    for label in labels:
        if label not in known:
            raise UnknownLabelError(label)
    return labels


def _require_solution(obj: QCAMin, name: str) -> SolutionShape:
    if obj.solution is None:
        raise InvalidInputError(
            name,
            f"The '{name}' object carries no conservative/parsimonious solution.",
        )
    return obj.solution


# ---------- per-solution processing ----------


def _solution_frames(
    shape: SolutionShape,
    solution_name: str,
    incl_cut: Optional[float],
    cnpn: Optional[str] = None,
) -> list[pd.DataFrame]:
    numbered: list[tuple[Optional[int], ModelStats]]
    if isinstance(shape, MultiModel):
        numbered = list(shape.numbered())
    elif isinstance(shape, SingleModel):
        numbered = [(None, shape.model)]
    else:
        raise TypeError(f"Unknown solution shape: {type(shape).__name__}")

    frames: list[pd.DataFrame] = []
    for model_num, stats in numbered:
        cases = construct_cases(stats.incl_cov, stats.pims)
        frames.append(
            build_rows(
                solution_name,
                stats.incl_cov,
                stats.sol_incl_cov,
                cases,
                model=model_num,
                cnpn=cnpn,
                incl_cut=incl_cut,
            )
        )
    return frames


# ---------- post-processing ----------


def _post_process(frames: list[pd.DataFrame], digits: Optional[int]) -> pd.DataFrame:
    non_empty = [f for f in frames if not f.empty]
    if not non_empty:
        return empty_table()

    df = pd.concat(non_empty, ignore_index=True)

    if digits is not None:
        df[NUMERIC_COLUMNS] = df[NUMERIC_COLUMNS].round(digits)

    # placeholder goes in last so rounding never sees it
    for col in df.columns[df.isna().any()]:
        df[col] = df[col].astype(object).where(df[col].notna(), MISSING)

    return df.reset_index(drop=True)
