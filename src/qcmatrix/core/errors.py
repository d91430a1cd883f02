# src/qcmatrix/core/errors.py
"""
Exceptions raised by circuit matrix operations.
"""
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from qcmatrix.core.linkage import LinkageIssue


class CircuitMatrixError(Exception):
    """Base class for circuit matrix errors."""
    pass


class MatrixBoundsError(CircuitMatrixError, IndexError):
    """Raised when a row index, a column index or an insertion position
    lies outside the matrix."""
    pass


class CellKindError(CircuitMatrixError, ValueError):
    """Raised when an operation is applied to a cell of the wrong kind,
    e.g. ``find_target`` on a cell that is not a CNOT control."""
    pass


class MalformedLinkageError(CircuitMatrixError):
    """Raised when CNOT controls and targets do not pair up.

    Attributes
    ----------
    issues : List[LinkageIssue]
        The offending groups.
    """

    def __init__(self, message: str, issues: Optional[List["LinkageIssue"]] = None):
        super().__init__(message)
        self.issues = list(issues or [])


class ExportError(CircuitMatrixError):
    """Raised when a cell cannot be expressed in the export target."""
    pass
