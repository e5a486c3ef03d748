from __future__ import annotations


class QCASolutionsError(Exception):
    """Base class for every error raised while consolidating QCA solutions."""


class InvalidInputError(QCASolutionsError, TypeError):
    """A solution argument is not a recognized minimization result."""

    def __init__(self, param: str, message: str | None = None) -> None:
        self.param = param
        super().__init__(
            message or f"The '{param}' object must be a QCAMin minimization result."
        )


class MissingParameterError(QCASolutionsError, ValueError):
    """A parameter required by another argument was not supplied."""


class UnknownLabelError(QCASolutionsError, KeyError):
    """A requested CnPn label is absent from the intermediate solution."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"CnPn '{self.label}' is not found in the intermediate solution object."


class MalformedSolutionError(QCASolutionsError, ValueError):
    """The upstream solution structure lacks a field the consolidation needs."""


class ExportUnavailableError(QCASolutionsError, RuntimeError):
    """Export was requested but no spreadsheet writer is installed."""


class ExportWriteError(QCASolutionsError, OSError):
    """Writing the consolidated table to disk failed."""
