from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

import numpy as np
import pandas as pd

from qca_solutions.errors import MalformedSolutionError

# Minimum membership score for a case to count as covered by a prime implicant
MEMBERSHIP_THRESHOLD = 0.5

NO_CASES = "-"
CASE_SEPARATOR = ", "


def construct_cases(
    incl_cov: pd.DataFrame, pims: Optional[pd.DataFrame] = None
) -> list[str]:
    """
    Return one case-membership string per prime implicant (row) of `incl_cov`.

    An inline `cases` column is used when present. Otherwise the cases are recomputed from
    the membership matrix `pims`: every case (row label) scoring >= 0.5 on the prime
    implicant's column is listed, in matrix row order.
    """
    if "cases" in incl_cov.columns:
        return [_format_inline(value) for value in incl_cov["cases"]]
    return cases_from_pims(incl_cov, pims)


def cases_from_pims(
    incl_cov: pd.DataFrame, pims: Optional[pd.DataFrame]
) -> list[str]:
    if pims is None:
        raise MalformedSolutionError(
            "incl.cov has no 'cases' column and no pims matrix was supplied."
        )

    prime_implicants = list(incl_cov.index)
    missing = [pi for pi in prime_implicants if pi not in pims.columns]
    if missing:
        raise MalformedSolutionError(
            f"pims matrix has no column for prime implicant(s): {', '.join(map(str, missing))}"
        )

    # first column wins on duplicated names; extra columns in pims are ignored
    pims = pims.loc[:, ~pims.columns.duplicated()]
    case_names = np.asarray([str(c) for c in pims.index], dtype=object)

    out: list[str] = []
    for pi in prime_implicants:
        scores = pd.to_numeric(pims[pi], errors="coerce").to_numpy(
            dtype=float
        )
        mask = scores >= MEMBERSHIP_THRESHOLD
        selected = case_names[mask]
        out.append(CASE_SEPARATOR.join(selected) if len(selected) else NO_CASES)
    return out


def _format_inline(value: Any) -> str:
    """
    Accepted shapes: a ready-made string, or a sequence of case identifiers
    (list, tuple, ndarray, Series). Missing or empty values become "-".
    """
    if isinstance(value, str):
        return value if value else NO_CASES
    if isinstance(value, (np.ndarray, pd.Series)):
        value = value.tolist()
    if isinstance(value, Sequence):
        return CASE_SEPARATOR.join(str(v) for v in value) if value else NO_CASES
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return NO_CASES
    raise MalformedSolutionError(
        f"Unsupported 'cases' entry {value!r}; expected a string or a list of case names."
    )
