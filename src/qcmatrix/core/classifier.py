# src/qcmatrix/core/classifier.py
"""
Cell classification for circuit matrices.

``CellClassifierMixin`` answers "what is at (i, j)?" for a matrix of
jagged rows. A coordinate past the end of its row is EMPTY; every other
coordinate decodes to exactly one ``CellKind``.
"""
from __future__ import annotations

from typing import List

from qcmatrix.core.cells import CellKind, decode_cell


class CellClassifierMixin:
    """
    Mixin providing the per-cell predicates of ``CircuitMatrix``.

    The host class provides ``_lines`` and ``cell(i, j)``; ``cell``
    performs the bounds checks, so every predicate raises
    ``MatrixBoundsError`` for a bad row index or a negative column.
    """

    _lines: List[List[int]]

    def _kind(self, i: int, j: int) -> CellKind:
        return self.cell(i, j).kind

    def is_input(self, i: int, j: int) -> bool:
        """Check if (i, j) is a circuit input."""
        return self._kind(i, j) is CellKind.INPUT

    def is_output(self, i: int, j: int) -> bool:
        """Check if (i, j) is a circuit output."""
        return self._kind(i, j) is CellKind.OUTPUT

    def is_distillation_ancilla_input(self, i: int, j: int) -> bool:
        """Check if (i, j) is an input that has to be supplied by
        magic-state distillation. Implies ``is_input``."""
        return self.cell(i, j).is_distillation_ancilla_input

    def is_wire(self, i: int, j: int) -> bool:
        """Check if (i, j) is a wire (no gate)."""
        return self._kind(i, j) is CellKind.WIRE

    def is_empty(self, i: int, j: int) -> bool:
        """Check if no qubit exists at (i, j).

        True for an explicit ``EMPTY`` code and for any column past the
        end of row ``i``.
        """
        return self._kind(i, j) is CellKind.EMPTY

    def is_initialisation(self, i: int, j: int) -> bool:
        """Check if (i, j) initialises the qubit in some basis."""
        return self._kind(i, j) is CellKind.INITIALISATION

    def is_measurement(self, i: int, j: int) -> bool:
        """Check if (i, j) measures the qubit in some basis."""
        return self._kind(i, j) is CellKind.MEASUREMENT

    def is_control(self, i: int, j: int) -> bool:
        """Check if (i, j) is a CNOT control."""
        return self._kind(i, j) is CellKind.CONTROL

    def is_target(self, i: int, j: int) -> bool:
        """Check if (i, j) is a CNOT target."""
        return self._kind(i, j) is CellKind.TARGET

    def has_injections(self) -> bool:
        """Check if the circuit uses injected (distilled) states.

        Scans the whole matrix on every call since rows may have been
        edited in between.
        """
        return any(
            decode_cell(value).is_distillation_ancilla_input
            for line in self._lines
            for value in line
        )
