from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from os import PathLike
from typing import Optional, TypeAlias

PathArg: TypeAlias = str | PathLike[str]


@dataclass
class ConsolidationOptions:

    # Print progress notices while consolidating
    verbose: bool = True

    # Spreadsheet path for the final table (None = no export)
    save: Optional[PathArg] = None

    # Decimal places for the numeric columns (None = keep full precision)
    round: Optional[int] = None

    # Keep only prime implicants with Consistency_PI >= incl_cut (None = keep all)
    incl_cut: Optional[float] = None

    def validate(self) -> None:
        """
        Validate the options before any solution is processed.
        """
        if self.round is not None:
            if isinstance(self.round, bool) or not isinstance(self.round, int):
                raise ValueError("round must be an integer number of decimal places.")
            if self.round < 0:
                raise ValueError("round must be >= 0.")
        if self.incl_cut is not None:
            if isinstance(self.incl_cut, bool) or not isinstance(self.incl_cut, Real):
                raise ValueError("incl_cut must be a number.")
            if math.isnan(float(self.incl_cut)):
                raise ValueError("incl_cut must not be NaN.")
        if self.save is not None and not str(self.save).strip():
            raise ValueError("save must be a non-empty file path.")
