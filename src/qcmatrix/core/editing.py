# src/qcmatrix/core/editing.py
"""
Structural edits of circuit matrices.

Removes rows and columns that carry no content and inserts new ones.
Every edit leaves the matrix with a single consistent column numbering,
so classification and linkage queries stay valid afterwards. Row lists
obtained through ``matrix[i]`` before an edit must not be reused after
it.
"""
from __future__ import annotations

from typing import (
    Iterable,
    List,
    Sequence,
)

import numpy as np

from qcmatrix.core.cells import EMPTY, WIRE, blank_mask, decode_cell
from qcmatrix.core.config import MatrixConfig, matrix_logger
from qcmatrix.core.errors import MatrixBoundsError


class StructuralEditMixin:
    """
    Mixin providing row/column removal and insertion.

    The host class provides ``_lines``, ``config`` and ``as_array()``.
    """

    _lines: List[List[int]]
    config: MatrixConfig

    def _log_edit(self, message: str, *args) -> None:
        matrix_logger.log(self.config.edit_log_level, message, *args)

    # ── removal ──────────────────────────────────────────────────────────

    def remove_empty_columns(self) -> List[int]:
        """
        Delete all columns consisting entirely of wires or empty cells.

        Kept columns are compacted to the left in their original order.
        Calling this twice removes nothing the second time.

        Returns
        -------
        List[int]
            Removed column indices, ascending, in pre-removal numbering.
        """
        codes = self.as_array()
        if codes.size == 0:
            return []
        removable = np.all(blank_mask(codes), axis=0)
        removed = np.flatnonzero(removable).tolist()
        if not removed:
            return []

        drop = set(removed)
        for line in self._lines:
            line[:] = [value for j, value in enumerate(line) if j not in drop]

        self._log_edit("Removed %d empty column(s): %s", len(removed), removed)
        return removed

    def remove_empty_rows(self) -> List[int]:
        """
        Delete all lines (qubits) that are never used.

        A line is unused when it holds no input, output, initialisation,
        measurement or CNOT cell, i.e. only wires and empty cells. Rows
        with CNOT cells are always kept, so no surviving group loses a
        partner here.

        Returns
        -------
        List[int]
            Removed row indices, ascending, in pre-removal numbering.
        """
        removed = [
            i for i, line in enumerate(self._lines)
            if all(decode_cell(value).is_blank for value in line)
        ]
        if not removed:
            return []

        drop = set(removed)
        self._lines[:] = [line for i, line in enumerate(self._lines) if i not in drop]

        self._log_edit("Removed %d empty row(s): %s", len(removed), removed)
        return removed

    # ── insertion ────────────────────────────────────────────────────────

    def insert_rows(self, before_position: int, rows: Iterable[Sequence[int]]) -> None:
        """
        Insert additional lines (qubits) into the matrix.

        Parameters
        ----------
        before_position : int
            Index of the line before which the rows are inserted. ``0``
            prepends, ``get_nr_lines()`` appends.
        rows : Iterable[Sequence[int]]
            Lines to insert. They are copied.

        Raises
        ------
        MatrixBoundsError
            If ``before_position`` is outside ``[0, get_nr_lines()]``.
        """
        nr_lines = len(self._lines)
        if not 0 <= before_position <= nr_lines:
            raise MatrixBoundsError(
                f"Cannot insert rows before position {before_position} "
                f"in a matrix with {nr_lines} lines"
            )
        new_lines = [[int(value) for value in row] for row in rows]
        self._lines[before_position:before_position] = new_lines

        self._log_edit("Inserted %d row(s) before row %d", len(new_lines), before_position)

    def insert_columns(self, before_position: int, nr_columns: int) -> None:
        """
        Insert wire columns on every line.

        Lines shorter than ``before_position`` are first padded with
        ``EMPTY`` up to ``before_position`` so the new columns share one
        index across all lines.

        Parameters
        ----------
        before_position : int
            Index of the column before which the columns are inserted.
        nr_columns : int
            Number of wire columns to insert.

        Raises
        ------
        MatrixBoundsError
            If ``before_position`` is negative.
        ValueError
            If ``nr_columns`` is negative.
        """
        if before_position < 0:
            raise MatrixBoundsError(f"Cannot insert columns before column {before_position}")
        if nr_columns < 0:
            raise ValueError(f"nr_columns must be non-negative, got {nr_columns}")
        if nr_columns == 0:
            return

        for line in self._lines:
            if len(line) < before_position:
                line.extend([EMPTY] * (before_position - len(line)))
            line[before_position:before_position] = [WIRE] * nr_columns

        self._log_edit("Inserted %d column(s) before column %d", nr_columns, before_position)
