# src/qcmatrix/core/__init__.py
"""
Circuit matrix core.

A quantum circuit held as a jagged matrix of integer cell codes, one line
per qubit and one column per time step. The package is split into:

1. cells: Integer encoding of cell roles and its decoded form
2. matrix: ``CircuitMatrix`` construction and element access
3. classifier: What a cell is (input, output, wire, basis, ...)
4. linkage: Which rows hold the controls/targets of a CNOT
5. editing: Removing and inserting rows and columns
6. printing: Text rendering for debugging
"""

from qcmatrix.core.cells import (
    # Categories
    CellKind,
    Basis,
    Cell,
    DISTILLED_BASES,
    # Encoding
    decode_cell,
    encode_cell,
    input_code,
    init_code,
    meas_code,
    control_code,
    target_code,
    blank_mask,
    gate_mask,
    # Canonical codes
    EMPTY,
    WIRE,
    OUTPUT,
    INPUT_Z,
    INPUT_X,
    INPUT_Y,
    INPUT_A,
    INIT_Z,
    INIT_X,
    INIT_Y,
    INIT_A,
    MEAS_Z,
    MEAS_X,
    MEAS_Y,
    MEAS_A,
)
from qcmatrix.core.config import (
    MatrixConfig,
    MATRIX_LOGGER_NAME,
    matrix_logger,
)
from qcmatrix.core.errors import (
    CircuitMatrixError,
    MatrixBoundsError,
    CellKindError,
    MalformedLinkageError,
    ExportError,
)
from qcmatrix.core.linkage import LinkageIssue
from qcmatrix.core.matrix import CircuitMatrix, QubitLine
from qcmatrix.core.printing import format_circuit, cell_symbol

__all__ = [
    # Cells
    "CellKind",
    "Basis",
    "Cell",
    "DISTILLED_BASES",
    "decode_cell",
    "encode_cell",
    "input_code",
    "init_code",
    "meas_code",
    "control_code",
    "target_code",
    "blank_mask",
    "gate_mask",
    "EMPTY",
    "WIRE",
    "OUTPUT",
    "INPUT_Z",
    "INPUT_X",
    "INPUT_Y",
    "INPUT_A",
    "INIT_Z",
    "INIT_X",
    "INIT_Y",
    "INIT_A",
    "MEAS_Z",
    "MEAS_X",
    "MEAS_Y",
    "MEAS_A",
    # Config and logging
    "MatrixConfig",
    "MATRIX_LOGGER_NAME",
    "matrix_logger",
    # Errors
    "CircuitMatrixError",
    "MatrixBoundsError",
    "CellKindError",
    "MalformedLinkageError",
    "ExportError",
    # Matrix
    "CircuitMatrix",
    "QubitLine",
    "LinkageIssue",
    # Printing
    "format_circuit",
    "cell_symbol",
]
