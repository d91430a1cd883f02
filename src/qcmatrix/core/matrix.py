# src/qcmatrix/core/matrix.py
"""
Circuit matrix.

Representation of a quantum circuit as a matrix of integer cell codes:
one row (line) per qubit, one column per time step. Rows are jagged; a
column past the end of a row means "no qubit here".
"""
from __future__ import annotations

import sys
from dataclasses import replace
from typing import (
    IO,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    TYPE_CHECKING,
)

import numpy as np

from qcmatrix.core.cells import EMPTY, Cell, decode_cell
from qcmatrix.core.classifier import CellClassifierMixin
from qcmatrix.core.config import MatrixConfig
from qcmatrix.core.editing import StructuralEditMixin
from qcmatrix.core.errors import MatrixBoundsError
from qcmatrix.core.linkage import GateLinkageMixin

if TYPE_CHECKING:
    import stim
    from qcmatrix.export.stim_export import StimExportConfig


QubitLine = List[int]


class CircuitMatrix(CellClassifierMixin, GateLinkageMixin, StructuralEditMixin):
    """
    Quantum circuit as a jagged matrix of encoded integer cells.

    Parameters
    ----------
    lines : Optional[Iterable[Sequence[int]]]
        Per-qubit cell codes, as produced by a circuit parser. Copied
        verbatim and in order; the codes are not validated.
    config : Optional[MatrixConfig]
        Behaviour switches. Defaults to ``MatrixConfig()``.

    Examples
    --------
    >>> from qcmatrix.core import cells
    >>> m = CircuitMatrix([
    ...     [cells.INPUT_Z, cells.control_code(1), cells.OUTPUT],
    ...     [cells.INPUT_Z, cells.target_code(1), cells.OUTPUT],
    ... ])
    >>> m.find_target(0, 1)
    [1]
    """

    def __init__(
        self,
        lines: Optional[Iterable[Sequence[int]]] = None,
        config: Optional[MatrixConfig] = None,
    ):
        self.config = config or MatrixConfig()
        self._lines: List[QubitLine] = []
        if lines is not None:
            self._lines = [[int(value) for value in line] for line in lines]

    # =========================================================================
    # Bounds checks
    # =========================================================================

    def _check_row(self, i: int) -> None:
        if not isinstance(i, (int, np.integer)) or isinstance(i, bool):
            raise TypeError(f"Line index must be an int, got {type(i).__name__}")
        if not 0 <= i < len(self._lines):
            raise MatrixBoundsError(
                f"Line {i} out of range for matrix with {len(self._lines)} lines"
            )

    @staticmethod
    def _check_column(j: int) -> None:
        if j < 0:
            raise MatrixBoundsError(f"Column {j} is negative")

    # =========================================================================
    # Shape
    # =========================================================================

    def get_nr_lines(self) -> int:
        """Number of circuit qubits."""
        return len(self._lines)

    def size(self) -> int:
        """Equivalent to ``get_nr_lines()``."""
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def get_max_column(self) -> int:
        """The maximum length of a qubit line in the circuit."""
        return max((len(line) for line in self._lines), default=0)

    def index_less_than_size(self, i: int, index: int) -> bool:
        """
        Check if ``index`` is inside line ``i``.

        Distinguishes real content from the empty padding past the end of
        a shorter line.
        """
        self._check_row(i)
        self._check_column(index)
        return index < len(self._lines[i])

    # =========================================================================
    # Element access
    # =========================================================================

    def __getitem__(self, i: int) -> QubitLine:
        self._check_row(i)
        return self._lines[i]

    def at(self, i: int) -> QubitLine:
        """Line ``i`` as a mutable list. Same as ``matrix[i]``."""
        return self[i]

    def __iter__(self) -> Iterator[QubitLine]:
        return iter(self._lines)

    def code_at(self, i: int, j: int) -> int:
        """Raw code at (i, j); ``EMPTY`` past the end of the line."""
        self._check_row(i)
        self._check_column(j)
        line = self._lines[i]
        return line[j] if j < len(line) else EMPTY

    def cell(self, i: int, j: int) -> Cell:
        """Decoded cell at (i, j)."""
        return decode_cell(self.code_at(i, j))

    def column(self, j: int) -> List[int]:
        """Codes of every line at column ``j``, ``EMPTY`` where a line is
        shorter."""
        self._check_column(j)
        return [line[j] if j < len(line) else EMPTY for line in self._lines]

    def as_array(self, fill: int = EMPTY) -> np.ndarray:
        """
        Rectangular copy of the matrix.

        Parameters
        ----------
        fill : int
            Code used past the end of shorter lines.

        Returns
        -------
        np.ndarray
            Integer array of shape ``(get_nr_lines(), get_max_column())``.
        """
        codes = np.full((len(self._lines), self.get_max_column()), fill, dtype=np.int64)
        for i, line in enumerate(self._lines):
            codes[i, :len(line)] = line
        return codes

    def to_lists(self) -> List[QubitLine]:
        """Deep copy of the lines."""
        return [list(line) for line in self._lines]

    def copy(self) -> "CircuitMatrix":
        """Independent copy sharing the same config values."""
        return CircuitMatrix(self._lines, config=replace(self.config))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircuitMatrix):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(lines={len(self._lines)}, "
            f"max_column={self.get_max_column()})"
        )

    # =========================================================================
    # Output
    # =========================================================================

    def __str__(self) -> str:
        from qcmatrix.core.printing import format_circuit
        return format_circuit(self)

    def print_circuit(self, file: Optional[IO[str]] = None) -> None:
        """For debugging purposes."""
        print(str(self), file=file or sys.stdout)

    def to_stim_circuit(self, config: Optional["StimExportConfig"] = None) -> "stim.Circuit":
        """Convert to a Stim circuit, see ``qcmatrix.export.to_stim_circuit``."""
        from qcmatrix.export.stim_export import to_stim_circuit
        return to_stim_circuit(self, config)
