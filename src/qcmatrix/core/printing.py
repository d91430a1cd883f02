# src/qcmatrix/core/printing.py
"""
Text rendering of circuit matrices for debugging.

The output is meant for eyeballing a matrix in a terminal or a test
failure message. It is not a file format and cannot be read back.
"""
from __future__ import annotations

from typing import Dict, List, TYPE_CHECKING

from qcmatrix.core.cells import Cell, CellKind, decode_cell

if TYPE_CHECKING:
    from qcmatrix.core.matrix import CircuitMatrix


CELL_SYMBOLS: Dict[CellKind, str] = {
    CellKind.EMPTY: ".",
    CellKind.WIRE: "-",
    CellKind.INPUT: "i",
    CellKind.OUTPUT: "o",
    CellKind.INITIALISATION: "p",
    CellKind.MEASUREMENT: "m",
    CellKind.CONTROL: "c",
    CellKind.TARGET: "t",
}


def cell_symbol(cell: Cell) -> str:
    """Short label of a cell, e.g. ``iA`` or ``c3``."""
    symbol = CELL_SYMBOLS[cell.kind]
    if cell.basis is not None:
        symbol += cell.basis.name
    elif cell.group is not None:
        symbol += str(cell.group)
    return symbol


def format_circuit(matrix: "CircuitMatrix") -> str:
    """
    Render a matrix as a fixed-width grid.

    One text line per qubit line, prefixed with the line index. Columns
    past the end of a shorter line are rendered as empty cells.

    Parameters
    ----------
    matrix : CircuitMatrix
        Matrix to render.

    Returns
    -------
    str
        The rendered grid, without a trailing newline.
    """
    width = matrix.get_max_column()
    symbols: List[List[str]] = [
        [cell_symbol(decode_cell(value)) for value in matrix.column(j)]
        for j in range(width)
    ]
    col_widths = [max((len(s) for s in col), default=1) for col in symbols]
    label_width = len(str(max(len(matrix) - 1, 0)))

    rows = []
    for i in range(len(matrix)):
        cells = [symbols[j][i].ljust(col_widths[j]) for j in range(width)]
        rows.append((f"{str(i).rjust(label_width)}: " + " ".join(cells)).rstrip())
    return "\n".join(rows)
