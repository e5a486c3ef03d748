from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TypeAlias

import pandas as pd


@dataclass(frozen=True)
class ModelStats:
    """
    Statistics bundle for one model of a minimization result.

    incl_cov:     one row per prime implicant (index = PI label) with inclS/PRI/covS/covU
                  and optionally a `cases` column
    sol_incl_cov: aggregate inclS/PRI/covS of the whole model
    pims:         membership matrix, rows = cases, columns = prime implicants
    """

    incl_cov: pd.DataFrame
    sol_incl_cov: pd.Series
    pims: Optional[pd.DataFrame] = None


@dataclass(frozen=True)
class SingleModel:
    model: ModelStats


@dataclass(frozen=True)
class MultiModel:
    models: tuple[ModelStats, ...]

    def __post_init__(self) -> None:
        # accept any iterable of models but store an immutable tuple
        object.__setattr__(self, "models", tuple(self.models))

    def numbered(self) -> list[tuple[int, ModelStats]]:
        """Return (1-based model number, model) pairs in model order."""
        return list(enumerate(self.models, start=1))


SolutionShape: TypeAlias = SingleModel | MultiModel


@dataclass(frozen=True)
class QCAMin:
    """
    A minimization result as consumed by the consolidation.

    Conservative and parsimonious results carry `solution`; intermediate results carry
    `i_sol`, a mapping from CnPn label to the solution found under that direction set.
    """

    solution: Optional[SolutionShape] = None
    i_sol: dict[str, SolutionShape] = field(default_factory=dict)

    @property
    def cnpn_labels(self) -> list[str]:
        return list(self.i_sol)
