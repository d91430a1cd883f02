"""
Tests for Stim export of circuit matrices.

Validates that:
1. Each column becomes one layer: preparations, CX gates, measurements.
2. Multi-target and multi-control groups expand to pairwise CX gates.
3. Blank columns are skipped and TICKs separate layers, per config.
4. A-basis cells raise ExportError, or become X-basis placeholders with
   a logged warning.
5. Malformed CNOT groups are refused.
6. The exported circuit is accepted by Stim's own tooling.
"""
import logging

import pytest
import stim

from qcmatrix.core import (
    CircuitMatrix,
    EMPTY,
    ExportError,
    INIT_A,
    INIT_X,
    INIT_Y,
    INIT_Z,
    INPUT_A,
    INPUT_X,
    INPUT_Z,
    MalformedLinkageError,
    MEAS_A,
    MEAS_X,
    MEAS_Z,
    OUTPUT,
    WIRE,
    control_code,
    init_code,
    input_code,
    meas_code,
    target_code,
)
from qcmatrix.export import (
    EXPORT_LOGGER_NAME,
    StimExportConfig,
    build_column_layer,
    to_stim_circuit,
)


# ============================================================================
# Builders
# ============================================================================

def _make_bell_pair() -> CircuitMatrix:
    return CircuitMatrix([
        [INIT_X, control_code(0), MEAS_Z, OUTPUT],
        [INIT_Z, target_code(0), MEAS_Z, OUTPUT],
    ])


# ============================================================================
# Layer construction
# ============================================================================

class TestColumnLayer:
    """build_column_layer."""

    def test_preparations(self):
        m = CircuitMatrix([[INIT_Z], [INIT_X], [INIT_Y], [INPUT_X], [init_code()]])
        layer = build_column_layer(m, 0)
        assert layer.resets == {"R": [0, 4], "RX": [1, 3], "RY": [2]}
        assert layer.cnots == []

    def test_basisless_input_emits_nothing(self):
        m = CircuitMatrix([[input_code()], [OUTPUT], [WIRE], [EMPTY]])
        assert build_column_layer(m, 0).is_empty()

    def test_measurements(self):
        m = CircuitMatrix([[MEAS_X], [meas_code()], [MEAS_Z]])
        assert build_column_layer(m, 0).measurements == {"MX": [0], "M": [1, 2]}

    def test_fan_out_expands_to_pairs(self):
        m = CircuitMatrix([
            [target_code(2)],
            [control_code(2)],
            [WIRE],
            [target_code(2)],
        ])
        assert build_column_layer(m, 0).cnots == [(1, 0), (1, 3)]

    def test_multi_control_expands_to_pairs(self):
        m = CircuitMatrix([[control_code(1)], [target_code(1)], [control_code(1)]])
        assert build_column_layer(m, 0).cnots == [(0, 1), (2, 1)]

    def test_column_past_every_line(self):
        assert build_column_layer(_make_bell_pair(), 10).is_empty()


# ============================================================================
# Full export
# ============================================================================

class TestToStimCircuit:
    """to_stim_circuit and CircuitMatrix.to_stim_circuit."""

    def test_bell_pair(self):
        circuit = to_stim_circuit(_make_bell_pair())
        expected = stim.Circuit("""
            RX 0
            R 1
            TICK
            CX 0 1
            TICK
            M 0 1
        """)
        assert circuit == expected

    def test_method_matches_function(self):
        m = _make_bell_pair()
        assert m.to_stim_circuit() == to_stim_circuit(m)

    def test_blank_columns_skipped(self):
        m = CircuitMatrix([
            [INPUT_Z, WIRE, MEAS_Z],
            [INPUT_Z, WIRE],
        ])
        expected = stim.Circuit("""
            R 0 1
            TICK
            M 0
        """)
        assert to_stim_circuit(m) == expected

    def test_blank_columns_kept(self):
        m = CircuitMatrix([[INPUT_Z, WIRE, MEAS_Z]])
        config = StimExportConfig(skip_blank_columns=False)
        circuit = to_stim_circuit(m, config)
        assert circuit.num_ticks == 2

    def test_no_ticks(self):
        config = StimExportConfig(tick_between_columns=False)
        circuit = to_stim_circuit(_make_bell_pair(), config)
        assert circuit.num_ticks == 0
        assert circuit.num_measurements == 2

    def test_empty_matrix(self):
        assert to_stim_circuit(CircuitMatrix()) == stim.Circuit()

    def test_matrix_is_not_modified(self):
        m = _make_bell_pair()
        before = m.to_lists()
        to_stim_circuit(m)
        assert m.to_lists() == before

    def test_deterministic_circuit_samples(self):
        """Z-basis prep, CX, Z measurement: both outcomes are 0."""
        m = CircuitMatrix([
            [INIT_Z, control_code(0), MEAS_Z],
            [INIT_Z, target_code(0), MEAS_Z],
        ])
        samples = to_stim_circuit(m).compile_sampler().sample(shots=8)
        assert not samples.any()


# ============================================================================
# Non-Clifford cells and malformed groups
# ============================================================================

class TestExportErrors:
    """Injection policy and linkage checks."""

    @pytest.mark.parametrize("value", [INPUT_A, INIT_A, MEAS_A])
    def test_a_basis_raises_by_default(self, value):
        with pytest.raises(ExportError):
            to_stim_circuit(CircuitMatrix([[value]]))

    def test_placeholder_policy(self, caplog):
        m = CircuitMatrix([[INPUT_A, MEAS_A]])
        config = StimExportConfig(injection_policy="placeholder")
        with caplog.at_level(logging.WARNING, logger=EXPORT_LOGGER_NAME):
            circuit = to_stim_circuit(m, config)
        assert circuit == stim.Circuit("RX 0\nTICK\nMX 0")
        assert len(caplog.records) == 2

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            StimExportConfig(injection_policy="ignore")

    def test_unpaired_control_refused(self):
        m = CircuitMatrix([[control_code(0)], [WIRE]])
        with pytest.raises(MalformedLinkageError) as excinfo:
            to_stim_circuit(m)
        assert excinfo.value.issues[0].reason == "no target in column"

    def test_many_to_many_refused(self):
        m = CircuitMatrix([
            [control_code(0)],
            [control_code(0)],
            [target_code(0)],
            [target_code(0)],
        ])
        with pytest.raises(MalformedLinkageError):
            to_stim_circuit(m)
