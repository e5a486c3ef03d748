from __future__ import annotations

import importlib.util
from os import PathLike
from pathlib import Path

import pandas as pd

from qca_solutions.errors import ExportUnavailableError, ExportWriteError

EXCEL_ENGINE = "openpyxl"
DEFAULT_SHEET_NAME = "QCA Solutions"


def writer_available() -> bool:
    return importlib.util.find_spec(EXCEL_ENGINE) is not None


def ensure_writer_available() -> None:
    if not writer_available():
        raise ExportUnavailableError(
            f"The '{EXCEL_ENGINE}' package is required for saving results but is not "
            f"installed. Install it with `pip install {EXCEL_ENGINE}`."
        )


def write_table(
    df: pd.DataFrame,
    path: str | PathLike[str],
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Path:
    """Write `df` to a single-sheet .xlsx workbook (header row, no index column)."""
    ensure_writer_available()

    out_path = Path(path).expanduser()
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(out_path, engine=EXCEL_ENGINE) as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False)
    except (OSError, ValueError) as exc:
        raise ExportWriteError(f"Could not write results to {out_path}: {exc}") from exc
    return out_path
