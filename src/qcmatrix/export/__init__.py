# src/qcmatrix/export/__init__.py
"""
Export of circuit matrices to other circuit representations.

- stim_export: Column-by-column translation to ``stim.Circuit``
"""

from qcmatrix.export.stim_export import (
    StimExportConfig,
    ColumnLayer,
    build_column_layer,
    to_stim_circuit,
    EXPORT_LOGGER_NAME,
    export_logger,
    PREPARATION_GATES,
    MEASUREMENT_GATES,
)

__all__ = [
    "StimExportConfig",
    "ColumnLayer",
    "build_column_layer",
    "to_stim_circuit",
    "EXPORT_LOGGER_NAME",
    "export_logger",
    "PREPARATION_GATES",
    "MEASUREMENT_GATES",
]
