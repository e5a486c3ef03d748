from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

import numpy as np
import pandas as pd

SOLUTION_LABELS = ("Conservative", "Intermediate", "Parsimonious")

COLUMNS = [
    "Solution",
    "Model",
    "Intermediate_CnPn",
    "Prime_Implicants",
    "Consistency_PI",
    "PRI_PI",
    "Raw_Coverage_PI",
    "Unique_Coverage_PI",
    "Solution_Consistency",
    "Solution_PRI",
    "Solution_Coverage",
    "Cases",
]

NUMERIC_COLUMNS = [
    "Consistency_PI",
    "PRI_PI",
    "Raw_Coverage_PI",
    "Unique_Coverage_PI",
    "Solution_Consistency",
    "Solution_PRI",
    "Solution_Coverage",
]

# output column <- incl.cov column
PI_STATS = {
    "Consistency_PI": "inclS",
    "PRI_PI": "PRI",
    "Raw_Coverage_PI": "covS",
    "Unique_Coverage_PI": "covU",
}

# output column <- sol.incl.cov field
SOLUTION_STATS = {
    "Solution_Consistency": "inclS",
    "Solution_PRI": "PRI",
    "Solution_Coverage": "covS",
}


def empty_table() -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype=object) for col in COLUMNS})


def build_rows(
    solution_name: str,
    incl_cov: pd.DataFrame,
    sol_incl_cov: pd.Series,
    cases: Sequence[str],
    *,
    model: Optional[int] = None,
    cnpn: Optional[str] = None,
    incl_cut: Optional[float] = None,
) -> pd.DataFrame:
    """
    Flatten one model's statistics into rows with the standard columns.

    Solution-level statistics are repeated on every row of the model. When `incl_cut` is
    given, only rows with Consistency_PI >= incl_cut are kept; row order follows incl.cov.
    """
    n = len(incl_cov)
    if len(cases) != n:
        raise ValueError(
            f"Got {len(cases)} case strings for {n} prime implicants."
        )

    data: dict[str, Any] = {
        "Solution": [solution_name] * n,
        "Model": pd.Series([model] * n, dtype=object),
        "Intermediate_CnPn": pd.Series([cnpn] * n, dtype=object),
        "Prime_Implicants": [str(pi) for pi in incl_cov.index],
    }
    for out_col, src_col in PI_STATS.items():
        data[out_col] = _numeric_column(incl_cov, src_col)
    for out_col, src_field in SOLUTION_STATS.items():
        data[out_col] = np.full(n, _numeric_value(sol_incl_cov.get(src_field)))
    data["Cases"] = list(cases)

    df = pd.DataFrame({col: _values(data[col]) for col in COLUMNS})

    if incl_cut is not None:
        df = df[df["Consistency_PI"] >= incl_cut]

    return df.reset_index(drop=True)


def _values(col: Any) -> Any:
    # Series carry their own index; strip it so all columns align positionally
    return col.to_numpy() if isinstance(col, pd.Series) else col


def _numeric_column(frame: pd.DataFrame, col: str) -> np.ndarray:
    if col not in frame.columns:
        return np.full(len(frame), np.nan)
    return pd.to_numeric(frame[col], errors="coerce").to_numpy(dtype=float)


def _numeric_value(value: Any) -> float:
    if value is None:
        return np.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return np.nan
