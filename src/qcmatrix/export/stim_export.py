# src/qcmatrix/export/stim_export.py
"""
Conversion of circuit matrices to Stim circuits.

Each matrix column becomes one layer of the Stim circuit: preparations,
then CNOTs, then measurements, separated from the next layer by a TICK.
Line ``i`` of the matrix is Stim qubit ``i``.

Cells are translated as follows:

* INPUT / INITIALISATION in basis Z, X, Y -> ``R``, ``RX``, ``RY``. An
  input without a basis is supplied from outside and emits nothing; an
  initialisation without a basis is a Z reset.
* MEASUREMENT in basis Z, X, Y -> ``M``, ``MX``, ``MY`` (no basis -> ``M``).
* CNOT groups -> one ``CX`` per (control, target) pair. The pairs of a
  group share a control or a target, so they commute and their order
  does not matter.
* OUTPUT, WIRE and EMPTY cells emit nothing.

``A``-basis cells are not Clifford and have no Stim equivalent; see
``StimExportConfig.injection_policy``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Dict,
    List,
    Optional,
    Tuple,
    TYPE_CHECKING,
)

import stim

from qcmatrix.core.cells import Basis, Cell, CellKind, decode_cell
from qcmatrix.core.errors import ExportError, MalformedLinkageError
from qcmatrix.core.linkage import group_issue

if TYPE_CHECKING:
    from qcmatrix.core.matrix import CircuitMatrix


EXPORT_LOGGER_NAME = "qcmatrix.export"
export_logger = logging.getLogger(EXPORT_LOGGER_NAME)
if not export_logger.handlers:
    export_logger.addHandler(logging.NullHandler())


INJECTION_POLICIES = ("error", "placeholder")

PREPARATION_GATES: Dict[Basis, str] = {
    Basis.Z: "R",
    Basis.X: "RX",
    Basis.Y: "RY",
}

MEASUREMENT_GATES: Dict[Basis, str] = {
    Basis.Z: "M",
    Basis.X: "MX",
    Basis.Y: "MY",
}

# Stand-ins for A-basis cells under the "placeholder" policy
PLACEHOLDER_PREPARATION = "RX"
PLACEHOLDER_MEASUREMENT = "MX"


@dataclass
class StimExportConfig:
    """Configuration for Stim export.

    Attributes
    ----------
    tick_between_columns : bool
        Emit a TICK between consecutive layers.
    skip_blank_columns : bool
        Drop columns that produce no instruction, so no empty TICK
        layers are emitted.
    injection_policy : str
        What to do with ``A``-basis cells: ``"error"`` raises
        ``ExportError``; ``"placeholder"`` prepares/measures in the X
        basis instead and logs a warning.
    """
    tick_between_columns: bool = True
    skip_blank_columns: bool = True
    injection_policy: str = "error"

    def __post_init__(self):
        if self.injection_policy not in INJECTION_POLICIES:
            raise ValueError(
                f"injection_policy must be one of {INJECTION_POLICIES}, "
                f"got {self.injection_policy!r}"
            )


@dataclass
class ColumnLayer:
    """
    Stim instructions produced by a single matrix column.

    All instructions of a layer act on distinct qubits, since a line has
    a single cell per column.
    """

    column: int = 0
    resets: Dict[str, List[int]] = field(default_factory=dict)
    cnots: List[Tuple[int, int]] = field(default_factory=list)
    measurements: Dict[str, List[int]] = field(default_factory=dict)

    def add_reset(self, gate_name: str, qubit: int) -> None:
        """Add a preparation."""
        self.resets.setdefault(gate_name, []).append(qubit)

    def add_cnot(self, control: int, target: int) -> None:
        """Add a CNOT."""
        self.cnots.append((control, target))

    def add_measurement(self, gate_name: str, qubit: int) -> None:
        """Add a measurement."""
        self.measurements.setdefault(gate_name, []).append(qubit)

    def is_empty(self) -> bool:
        """Check if layer has no operations."""
        return not self.resets and not self.cnots and not self.measurements

    def to_stim(self, circuit: stim.Circuit) -> None:
        """Append this layer's operations to a Stim circuit."""
        # Resets first
        for gate_name, qubits in self.resets.items():
            circuit.append(gate_name, qubits)

        if self.cnots:
            circuit.append("CX", [q for pair in self.cnots for q in pair])

        # Measurements last
        for gate_name, qubits in self.measurements.items():
            circuit.append(gate_name, qubits)


def _gate_for(
    cell: Cell,
    gates: Dict[Basis, str],
    default: Optional[str],
    placeholder: str,
    where: Tuple[int, int],
    config: StimExportConfig,
) -> Optional[str]:
    if cell.basis is None:
        return default
    if cell.basis in gates:
        return gates[cell.basis]
    if config.injection_policy == "placeholder":
        export_logger.warning(
            "%s cell at %s is in the %s basis, exported as %s",
            cell.kind.name, where, cell.basis.name, placeholder,
        )
        return placeholder
    raise ExportError(
        f"{cell.kind.name} cell at {where} is in the {cell.basis.name} basis, "
        f"which is not a Clifford operation and cannot be exported to Stim"
    )


def build_column_layer(
    matrix: "CircuitMatrix",
    column: int,
    config: Optional[StimExportConfig] = None,
) -> ColumnLayer:
    """
    Translate one matrix column into a ``ColumnLayer``.

    Raises
    ------
    MalformedLinkageError
        If a CNOT group on the column does not pair up.
    ExportError
        If an ``A``-basis cell is met under the ``"error"`` policy.
    """
    config = config or StimExportConfig()
    layer = ColumnLayer(column=column)

    for i, value in enumerate(matrix.column(column)):
        cell = decode_cell(value)
        where = (i, column)
        if cell.kind is CellKind.INPUT:
            gate = _gate_for(cell, PREPARATION_GATES, None, PLACEHOLDER_PREPARATION, where, config)
            if gate is not None:
                layer.add_reset(gate, i)
        elif cell.kind is CellKind.INITIALISATION:
            gate = _gate_for(cell, PREPARATION_GATES, "R", PLACEHOLDER_PREPARATION, where, config)
            layer.add_reset(gate, i)
        elif cell.kind is CellKind.MEASUREMENT:
            gate = _gate_for(cell, MEASUREMENT_GATES, "M", PLACEHOLDER_MEASUREMENT, where, config)
            layer.add_measurement(gate, i)

    for group, (controls, targets) in matrix.cnot_groups(column).items():
        issue = group_issue(column, group, controls, targets)
        if issue is not None:
            raise MalformedLinkageError(f"Cannot export CNOT: {issue}", [issue])
        for control in controls:
            for target in targets:
                layer.add_cnot(control, target)

    return layer


def to_stim_circuit(
    matrix: "CircuitMatrix",
    config: Optional[StimExportConfig] = None,
) -> stim.Circuit:
    """
    Convert a circuit matrix to a Stim circuit.

    Parameters
    ----------
    matrix : CircuitMatrix
        Matrix to convert. It is not modified.
    config : Optional[StimExportConfig]
        Export options.

    Returns
    -------
    stim.Circuit
        The circuit, one layer per (non-blank) column.
    """
    config = config or StimExportConfig()
    layers = [
        build_column_layer(matrix, j, config)
        for j in range(matrix.get_max_column())
    ]
    if config.skip_blank_columns:
        layers = [layer for layer in layers if not layer.is_empty()]

    circuit = stim.Circuit()
    for idx, layer in enumerate(layers):
        layer.to_stim(circuit)
        # Add TICK between layers (except after last)
        if config.tick_between_columns and idx < len(layers) - 1:
            circuit.append("TICK")
    return circuit
