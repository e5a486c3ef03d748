from .adapters import from_mapping, load_solution
from .config import ConsolidationOptions
from .consolidate import consolidate, qca_solutions
from .errors import (
    ExportUnavailableError,
    ExportWriteError,
    InvalidInputError,
    MalformedSolutionError,
    MissingParameterError,
    QCASolutionsError,
    UnknownLabelError,
)
from .solution import ModelStats, MultiModel, QCAMin, SingleModel

__all__ = [
    "ConsolidationOptions",
    "QCAMin",
    "ModelStats",
    "SingleModel",
    "MultiModel",
    "consolidate",
    "qca_solutions",
    "from_mapping",
    "load_solution",
    "QCASolutionsError",
    "InvalidInputError",
    "MissingParameterError",
    "UnknownLabelError",
    "MalformedSolutionError",
    "ExportUnavailableError",
    "ExportWriteError",
]
