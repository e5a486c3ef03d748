from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path
from typing import Any, Protocol

import pandas as pd

from qca_solutions.errors import MalformedSolutionError
from qca_solutions.solution import (
    ModelStats,
    MultiModel,
    QCAMin,
    SingleModel,
    SolutionShape,
)

# jsonlite writes data.frame row names under this key
ROWNAME_KEY = "_row"


class SolutionAdapter(Protocol):
    """Minimal interface the consolidation needs to turn upstream objects into QCAMin."""

    def adapt(self, obj: Any) -> QCAMin: ...


class NestedSolutionAdapter:
    """
    Default adapter for results laid out like the R QCA package's `QCA_min` objects.

    Fields are looked up by their R names (`IC`, `incl.cov`, `i.sol`, ...) on mappings, or
    as attributes on plain objects (dots replaced by underscores, so `incl_cov`).
    """

    def adapt(self, obj: Any) -> QCAMin:
        if isinstance(obj, QCAMin):
            return obj

        i_sol = _field(obj, "i.sol")
        if i_sol is not None:
            if not isinstance(i_sol, Mapping):
                raise MalformedSolutionError(
                    "'i.sol' must map CnPn labels to solution objects."
                )
            return QCAMin(
                i_sol={str(label): self.adapt_shape(sol) for label, sol in i_sol.items()}
            )

        return QCAMin(solution=self.adapt_shape(obj))

    def adapt_shape(self, obj: Any) -> SolutionShape:
        """Detect the single- vs multi-model layout once and tag it."""
        ic = _field(obj, "IC")
        if ic is None:
            raise MalformedSolutionError("Solution object has no 'IC' component.")

        individual = _field(ic, "individual")
        if individual is not None:
            if isinstance(individual, Mapping):
                individual = list(individual.values())
            return MultiModel(
                tuple(self.model_stats(m, _field(m, "pims")) for m in individual)
            )
        return SingleModel(self.model_stats(ic, _field(obj, "pims")))

    def model_stats(self, bundle: Any, pims: Any) -> ModelStats:
        incl_cov = _field(bundle, "incl.cov")
        sol_incl_cov = _field(bundle, "sol.incl.cov")
        if incl_cov is None:
            raise MalformedSolutionError("Model bundle has no 'incl.cov' table.")
        if sol_incl_cov is None:
            raise MalformedSolutionError("Model bundle has no 'sol.incl.cov' record.")
        return ModelStats(
            incl_cov=_as_frame(incl_cov, "incl.cov"),
            sol_incl_cov=_as_record(sol_incl_cov),
            pims=None if pims is None else _as_frame(pims, "pims"),
        )


def from_mapping(obj: Any, adapter: SolutionAdapter | None = None) -> QCAMin:
    """Adapt a nested QCA-shaped mapping (or attribute object) into a QCAMin."""
    return (adapter or NestedSolutionAdapter()).adapt(obj)


def load_solution(
    path: str | PathLike[str], adapter: SolutionAdapter | None = None
) -> QCAMin:
    """
    Load a minimization result exported to JSON (e.g. via jsonlite).

    Tables may be stored "index"-oriented (`{row_label: {column: value}}`) or as a list
    of records carrying their row label under `_row`.
    """
    file_path = Path(path).expanduser()

    if file_path.suffix.lower() != ".json":
        raise ValueError("load_solution expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Solution JSON file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    if not isinstance(data, Mapping):
        raise MalformedSolutionError("JSON file must contain a solution object.")
    return from_mapping(data, adapter)


# ---------- helpers ----------


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    value = getattr(obj, key, None)
    if value is None and "." in key:
        value = getattr(obj, key.replace(".", "_"), None)
    return value


def _records_frame(records: Sequence[Any], what: str) -> pd.DataFrame:
    if not all(isinstance(r, Mapping) for r in records):
        raise MalformedSolutionError(f"'{what}' records must be objects/dicts.")
    df = pd.DataFrame(list(records))
    if ROWNAME_KEY in df.columns:
        df = df.set_index(ROWNAME_KEY)
        df.index.name = None
    return df


def _as_frame(value: Any, what: str) -> pd.DataFrame:
    if isinstance(value, pd.DataFrame):
        return value.copy()
    if isinstance(value, Mapping):
        if not value:
            return pd.DataFrame()
        return pd.DataFrame.from_dict(dict(value), orient="index")
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return _records_frame(value, what)
    raise MalformedSolutionError(
        f"'{what}' must be a DataFrame, a mapping of rows or a list of records."
    )


def _as_record(value: Any) -> pd.Series:
    if isinstance(value, pd.Series):
        return value.copy()
    if isinstance(value, pd.DataFrame):
        if value.empty:
            raise MalformedSolutionError("'sol.incl.cov' has no rows.")
        return value.iloc[0].copy()
    if isinstance(value, Mapping):
        # index-oriented single row: {row_label: {column: value}}
        if len(value) == 1 and isinstance(next(iter(value.values())), Mapping):
            return _as_record(next(iter(value.values())))
        return pd.Series({k: v for k, v in value.items() if k != ROWNAME_KEY})
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not value:
            raise MalformedSolutionError("'sol.incl.cov' has no rows.")
        return _as_record(value[0])
    raise MalformedSolutionError(
        "'sol.incl.cov' must be a Series, a one-row DataFrame or a mapping."
    )
