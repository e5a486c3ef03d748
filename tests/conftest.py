# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from qca_solutions.solution import ModelStats, MultiModel, QCAMin, SingleModel


# -----------------------------
# Builders
# -----------------------------
def _make_stats(
    pis: dict[str, tuple[float, float, float, float]],
    sol: tuple[float, float, float] = (0.85, 0.8, 0.6),
    cases: list | None = None,
    pims: pd.DataFrame | None = None,
) -> ModelStats:
    """ModelStats from {PI: (inclS, PRI, covS, covU)} plus solution-level scores."""
    incl_cov = pd.DataFrame.from_dict(
        pis, orient="index", columns=["inclS", "PRI", "covS", "covU"]
    )
    if cases is not None:
        incl_cov["cases"] = pd.Series(cases, index=incl_cov.index, dtype=object)
    sol_incl_cov = pd.Series({"inclS": sol[0], "PRI": sol[1], "covS": sol[2]})
    return ModelStats(incl_cov=incl_cov, sol_incl_cov=sol_incl_cov, pims=pims)


def _make_pims(scores: dict[str, dict[str, float]]) -> pd.DataFrame:
    """Membership matrix from {case: {PI: score}}."""
    return pd.DataFrame.from_dict(scores, orient="index")


@pytest.fixture
def single_conservative() -> QCAMin:
    pims = _make_pims(
        {
            "AT": {"A*B": 0.9, "~C": 0.2},
            "BE": {"A*B": 0.4, "~C": 0.5},
            "DK": {"A*B": 0.7, "~C": 0.1},
        }
    )
    stats = _make_stats(
        {"A*B": (0.9, 0.85, 0.5, 0.2), "~C": (0.75, 0.6, 0.3, 0.1)},
        sol=(0.82, 0.77, 0.65),
        pims=pims,
    )
    return QCAMin(solution=SingleModel(stats))


@pytest.fixture
def multi_parsimonious() -> QCAMin:
    m1 = _make_stats(
        {"A": (0.88, 0.8, 0.6, 0.6)}, sol=(0.88, 0.8, 0.6), cases=[["AT", "DK"]]
    )
    m2 = _make_stats(
        {"B": (0.7, 0.65, 0.5, 0.3), "~C": (0.95, 0.9, 0.2, 0.1)},
        sol=(0.79, 0.7, 0.7),
        cases=[["BE"], []],
    )
    return QCAMin(solution=MultiModel((m1, m2)))


@pytest.fixture
def intermediate() -> QCAMin:
    return QCAMin(
        i_sol={
            "C1P1": SingleModel(
                _make_stats({"A*B": (0.91, 0.86, 0.45, 0.45)}, cases=["AT, DK"])
            ),
            "C2P2": SingleModel(
                _make_stats({"A*~C": (0.83, 0.8, 0.4, 0.4)}, cases=[["BE"]])
            ),
            "C3P1": MultiModel(
                (
                    _make_stats({"A": (0.8, 0.7, 0.6, 0.6)}, cases=[["AT"]]),
                    _make_stats({"B": (0.6, 0.5, 0.6, 0.6)}, cases=[["DK"]]),
                )
            ),
        }
    )


@pytest.fixture
def make_stats():
    return _make_stats


@pytest.fixture
def make_pims():
    return _make_pims


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]
