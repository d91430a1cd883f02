# src/qcmatrix/core/cells.py
"""
Cell encoding for circuit matrices.

A circuit matrix stores one integer per (qubit, time step). The integer
domain is split into bands, and every integer decodes to exactly one
category:

==================  ==================  ===================================
Value               Category            Payload
==================  ==================  ===================================
``v < 0``           EMPTY               no qubit at this coordinate
``v == 0``          WIRE                identity, no gate
``1 <= v < 100``    INPUT               basis = ``v``
``100 <= v < 200``  OUTPUT              none
``200 <= v < 300``  INITIALISATION      basis = ``v - 200``
``300 <= v < 400``  MEASUREMENT         basis = ``v - 300``
``v >= 400``        CONTROL / TARGET    group = ``(v - 400) // 2``
==================  ==================  ===================================

CNOT cells alternate inside their band: an even offset is the control of
the group, an odd offset is a target of the group.

The numeric values are shared with the parser that produces raw rows and
must not change.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import (
    Dict,
    Optional,
)

import numpy as np


class CellKind(Enum):
    """Semantic category of a matrix cell."""
    EMPTY = auto()          # No qubit at this coordinate
    WIRE = auto()           # Pass-through, no gate
    INPUT = auto()          # Circuit input boundary
    OUTPUT = auto()         # Circuit output boundary
    INITIALISATION = auto() # Preparation in a basis
    MEASUREMENT = auto()    # Measurement in a basis
    CONTROL = auto()        # CNOT control
    TARGET = auto()         # CNOT target


class Basis(IntEnum):
    """Basis payload of input, initialisation and measurement cells.

    ``Y`` and ``A`` states are produced by magic-state distillation, so an
    input in one of these bases is a distillation ancilla injection.
    """
    Z = 1
    X = 2
    Y = 3
    A = 4


DISTILLED_BASES = frozenset({Basis.Y, Basis.A})

# Band boundaries
EMPTY = -1
WIRE = 0
INPUT_BAND_START = 1
OUTPUT_BAND_START = 100
INIT_BAND_START = 200
MEAS_BAND_START = 300
CNOT_BAND_START = 400

OUTPUT = OUTPUT_BAND_START

INPUT_Z = int(Basis.Z)
INPUT_X = int(Basis.X)
INPUT_Y = int(Basis.Y)
INPUT_A = int(Basis.A)

INIT_Z = INIT_BAND_START + Basis.Z
INIT_X = INIT_BAND_START + Basis.X
INIT_Y = INIT_BAND_START + Basis.Y
INIT_A = INIT_BAND_START + Basis.A

MEAS_Z = MEAS_BAND_START + Basis.Z
MEAS_X = MEAS_BAND_START + Basis.X
MEAS_Y = MEAS_BAND_START + Basis.Y
MEAS_A = MEAS_BAND_START + Basis.A


@dataclass(frozen=True)
class Cell:
    """Decoded value of a single matrix cell.

    Attributes
    ----------
    kind : CellKind
        Category of the cell.
    basis : Optional[Basis]
        Basis for input, initialisation and measurement cells. ``None``
        when the category carries no basis or the code names none.
    group : Optional[int]
        CNOT group identifier for control and target cells.
    """
    kind: CellKind
    basis: Optional[Basis] = None
    group: Optional[int] = None

    @property
    def is_gate(self) -> bool:
        """Check if this cell is part of a CNOT."""
        return self.kind in (CellKind.CONTROL, CellKind.TARGET)

    @property
    def is_blank(self) -> bool:
        """Check if this cell carries no semantic content."""
        return self.kind in (CellKind.WIRE, CellKind.EMPTY)

    @property
    def is_distillation_ancilla_input(self) -> bool:
        """Check if this is an input supplied by magic-state distillation."""
        return self.kind is CellKind.INPUT and self.basis in DISTILLED_BASES

    def encode(self) -> int:
        """Get the integer code of this cell."""
        return encode_cell(self)


def _basis_from_payload(payload: int) -> Optional[Basis]:
    try:
        return Basis(payload)
    except ValueError:
        return None


def decode_cell(value: int) -> Cell:
    """Decode an integer cell code.

    Every integer decodes to exactly one category, so this never raises
    for integral input.

    Parameters
    ----------
    value : int
        Raw cell code.

    Returns
    -------
    Cell
        The decoded cell.
    """
    value = int(value)
    if value < 0:
        return Cell(CellKind.EMPTY)
    if value == WIRE:
        return Cell(CellKind.WIRE)
    if value < OUTPUT_BAND_START:
        return Cell(CellKind.INPUT, basis=_basis_from_payload(value))
    if value < INIT_BAND_START:
        return Cell(CellKind.OUTPUT)
    if value < MEAS_BAND_START:
        return Cell(CellKind.INITIALISATION, basis=_basis_from_payload(value - INIT_BAND_START))
    if value < CNOT_BAND_START:
        return Cell(CellKind.MEASUREMENT, basis=_basis_from_payload(value - MEAS_BAND_START))
    group, role = divmod(value - CNOT_BAND_START, 2)
    kind = CellKind.CONTROL if role == 0 else CellKind.TARGET
    return Cell(kind, group=group)


def encode_cell(cell: Cell) -> int:
    """Encode a decoded cell back to its canonical integer code.

    Input, initialisation and measurement cells without a basis encode
    to the basis-less code of their band.

    Raises
    ------
    ValueError
        If a CNOT cell has no valid group or a basis is attached to a
        category that does not carry one.
    """
    kind = cell.kind
    if kind in (CellKind.CONTROL, CellKind.TARGET):
        if cell.group is None or cell.group < 0:
            raise ValueError(f"CNOT cell needs a non-negative group, got {cell.group!r}")
        role = 0 if kind is CellKind.CONTROL else 1
        return CNOT_BAND_START + 2 * cell.group + role
    if cell.basis is not None and kind not in _BASIS_BAND_START:
        raise ValueError(f"{kind.name} cells carry no basis")
    if kind is CellKind.EMPTY:
        return EMPTY
    if kind is CellKind.WIRE:
        return WIRE
    if kind is CellKind.OUTPUT:
        return OUTPUT
    if kind is CellKind.INPUT:
        if cell.basis is None:
            return _UNSPECIFIED_INPUT
        return int(cell.basis)
    return _BASIS_BAND_START[kind] + (int(cell.basis) if cell.basis is not None else 0)


_BASIS_BAND_START: Dict[CellKind, int] = {
    CellKind.INPUT: INPUT_BAND_START,
    CellKind.INITIALISATION: INIT_BAND_START,
    CellKind.MEASUREMENT: MEAS_BAND_START,
}

# First input payload with no basis attached
_UNSPECIFIED_INPUT = int(max(Basis)) + 1


# =============================================================================
# Code constructors
# =============================================================================

def input_code(basis: Optional[Basis] = None) -> int:
    """Get the code of an input in ``basis``."""
    return encode_cell(Cell(CellKind.INPUT, basis=basis))


def init_code(basis: Optional[Basis] = None) -> int:
    """Get the code of an initialisation in ``basis``."""
    return encode_cell(Cell(CellKind.INITIALISATION, basis=basis))


def meas_code(basis: Optional[Basis] = None) -> int:
    """Get the code of a measurement in ``basis``."""
    return encode_cell(Cell(CellKind.MEASUREMENT, basis=basis))


def control_code(group: int) -> int:
    """Get the code of the control cell of CNOT ``group``."""
    return encode_cell(Cell(CellKind.CONTROL, group=group))


def target_code(group: int) -> int:
    """Get the code of a target cell of CNOT ``group``."""
    return encode_cell(Cell(CellKind.TARGET, group=group))


# =============================================================================
# Vectorised helpers
# =============================================================================

def blank_mask(codes: np.ndarray) -> np.ndarray:
    """Boolean mask of cells that are wire or empty.

    Parameters
    ----------
    codes : np.ndarray
        Array of raw cell codes (any shape).

    Returns
    -------
    np.ndarray
        Boolean array of the same shape.
    """
    return np.asarray(codes) <= WIRE


def gate_mask(codes: np.ndarray) -> np.ndarray:
    """Boolean mask of CNOT control and target cells."""
    return np.asarray(codes) >= CNOT_BAND_START
