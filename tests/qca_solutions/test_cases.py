from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from qca_solutions.cases import construct_cases
from qca_solutions.errors import MalformedSolutionError


def _incl_cov(pis: list[str], cases: list | None = None) -> pd.DataFrame:
    df = pd.DataFrame({"inclS": [0.9] * len(pis)}, index=pis)
    if cases is not None:
        df["cases"] = pd.Series(cases, index=pis, dtype=object)
    return df


def test_inline_strings_are_used_as_is():
    incl_cov = _incl_cov(["A*B", "~C"], cases=["AT,DK; BE", "FR"])
    assert construct_cases(incl_cov) == ["AT,DK; BE", "FR"]


def test_inline_sequences_are_joined():
    incl_cov = _incl_cov(
        ["A*B", "~C", "D"], cases=[["AT", "DK"], ("BE",), np.array(["FR", "NL"])]
    )
    assert construct_cases(incl_cov) == ["AT, DK", "BE", "FR, NL"]


def test_inline_empty_or_missing_becomes_dash():
    incl_cov = _incl_cov(["A", "B", "C", "D"], cases=[[], None, "", pd.NA])
    assert construct_cases(incl_cov) == ["-", "-", "-", "-"]


def test_inline_string_dtype_missing_becomes_dash():
    incl_cov = _incl_cov(["A", "B"])
    incl_cov["cases"] = pd.array(["AT, DK", pd.NA], dtype="string")
    assert construct_cases(incl_cov) == ["AT, DK", "-"]


def test_inline_rejects_unsupported_values():
    incl_cov = _incl_cov(["A"], cases=[42])
    with pytest.raises(MalformedSolutionError):
        construct_cases(incl_cov)


def test_pims_fallback_selects_cases_at_or_above_half():
    pims = pd.DataFrame(
        {"A*B": [0.9, 0.5, 0.49], "~C": [0.1, 0.2, 0.3]},
        index=["AT", "BE", "DK"],
    )
    incl_cov = _incl_cov(["A*B", "~C"])

    assert construct_cases(incl_cov, pims) == ["AT, BE", "-"]


def test_pims_fallback_realigns_columns_to_prime_implicants():
    # extra column and a different column order in the raw matrix
    pims = pd.DataFrame(
        {"EXTRA": [1.0, 1.0], "~C": [0.0, 0.8], "A*B": [0.7, 0.0]},
        index=["AT", "BE"],
    )
    incl_cov = _incl_cov(["A*B", "~C"])

    assert construct_cases(incl_cov, pims) == ["AT", "BE"]


def test_inline_and_pims_paths_agree():
    inline = _incl_cov(["P1"], cases=[["A", "B"]])
    pims = pd.DataFrame({"P1": [0.8, 0.5, 0.2]}, index=["A", "B", "C"])

    assert construct_cases(inline) == construct_cases(_incl_cov(["P1"]), pims)
    assert construct_cases(inline) == ["A, B"]


def test_pims_fallback_requires_matrix():
    with pytest.raises(MalformedSolutionError):
        construct_cases(_incl_cov(["A"]), None)


def test_pims_fallback_requires_column_per_prime_implicant():
    pims = pd.DataFrame({"A": [0.9]}, index=["AT"])
    with pytest.raises(MalformedSolutionError, match="B"):
        construct_cases(_incl_cov(["A", "B"]), pims)


def test_pims_fallback_uses_first_of_duplicated_columns():
    pims = pd.DataFrame([[0.9, 0.1, 0.9]], index=["AT"], columns=["A", "A", "B"])
    incl_cov = _incl_cov(["A", "B"])

    assert construct_cases(incl_cov, pims) == ["AT", "AT"]
