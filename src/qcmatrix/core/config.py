# src/qcmatrix/core/config.py
"""
Configuration for circuit matrices and the package logger.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass


MATRIX_LOGGER_NAME = "qcmatrix.core"
matrix_logger = logging.getLogger(MATRIX_LOGGER_NAME)
if not matrix_logger.handlers:
    matrix_logger.addHandler(logging.NullHandler())


@dataclass
class MatrixConfig:
    """Behaviour switches for a ``CircuitMatrix``.

    Attributes
    ----------
    strict_linkage : bool
        If True, ``find_target``/``find_control`` raise
        ``MalformedLinkageError`` when the CNOT group of the queried cell
        is malformed (no partner in its column, or several controls and
        several targets) instead of returning the rows found.
    debug_mode : bool
        Log structural edits at INFO level (DEBUG otherwise).
    """
    strict_linkage: bool = False
    debug_mode: bool = False

    @property
    def edit_log_level(self) -> int:
        """Log level used for structural edit messages."""
        return logging.INFO if self.debug_mode else logging.DEBUG
