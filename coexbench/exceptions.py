"""
Error types raised by the scoring pipeline.

Missing or unreadable inputs are reported with the built-in
``FileNotFoundError`` / ``OSError``; the classes below cover content
problems.
"""

from pathlib import Path
from typing import Optional


class CoexBenchError(Exception):
    """Base class for coexbench errors."""


class FormatError(CoexBenchError, ValueError):
    """
    A coexpression line could not be parsed.

    Parameters
    ----------
    message : str
        What was wrong with the line.
    path : str or Path, optional
        File the line came from.
    line_no : int, optional
        1-based line number within ``path``.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str | Path] = None,
        line_no: Optional[int] = None,
    ):
        self.path = str(path) if path is not None else None
        self.line_no = line_no
        if self.path is not None and line_no is not None:
            message = f"{self.path}:{line_no}: {message}"
        elif self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class DegenerateInputError(CoexBenchError, ValueError):
    """The pair totals leave the partial AUC undefined."""
