# src/qcmatrix/core/linkage.py
"""
CNOT linkage resolution.

Controls and targets of a CNOT share a column and a group id embedded in
their cell codes. There is no pointer between the cells: every lookup is
a scan of the column, so row insertions and removals can never leave a
stale reference behind.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Dict,
    List,
    Optional,
    Tuple,
)

import numpy as np

from qcmatrix.core.cells import CellKind, decode_cell, gate_mask
from qcmatrix.core.config import MatrixConfig
from qcmatrix.core.errors import CellKindError, MalformedLinkageError


@dataclass
class LinkageIssue:
    """A CNOT group whose controls and targets do not pair up.

    Attributes
    ----------
    column : int
        Column of the group.
    group : int
        Group identifier.
    controls : List[int]
        Rows holding a control of the group.
    targets : List[int]
        Rows holding a target of the group.
    reason : str
        Short description of the problem.
    """
    column: int
    group: int
    controls: List[int] = field(default_factory=list)
    targets: List[int] = field(default_factory=list)
    reason: str = ""

    def __str__(self) -> str:
        return (
            f"column {self.column}, group {self.group}: {self.reason} "
            f"(controls={self.controls}, targets={self.targets})"
        )


def group_issue(
    column: int,
    group: int,
    controls: List[int],
    targets: List[int],
) -> Optional[LinkageIssue]:
    """Check one CNOT group, returning the problem or None if it is well-formed."""
    if not controls:
        reason = "no control in column"
    elif not targets:
        reason = "no target in column"
    elif len(controls) > 1 and len(targets) > 1:
        reason = "several controls and several targets"
    else:
        return None
    return LinkageIssue(column, group, list(controls), list(targets), reason)


class GateLinkageMixin:
    """
    Mixin resolving multi-control / multi-target CNOTs by column scan.

    The host class provides ``_lines``, ``config``, ``cell(i, j)`` and
    ``column(j)``.
    """

    _lines: List[List[int]]
    config: MatrixConfig

    def _partners(self, i: int, j: int, anchor: CellKind, partner: CellKind) -> List[int]:
        cell = self.cell(i, j)
        if cell.kind is not anchor:
            raise CellKindError(
                f"Cell ({i}, {j}) is {cell.kind.name}, expected {anchor.name}"
            )
        rows = []
        for k, value in enumerate(self.column(j)):
            if k == i:
                continue
            other = decode_cell(value)
            if other.kind is partner and other.group == cell.group:
                rows.append(k)
        if self.config.strict_linkage:
            controls, targets = self.cnot_groups(j)[cell.group]
            issue = group_issue(j, cell.group, controls, targets)
            if issue is not None:
                raise MalformedLinkageError(str(issue), [issue])
        return rows

    def find_target(self, i: int, j: int) -> List[int]:
        """
        Find the targets of the CNOT whose control sits at (i, j).

        Parameters
        ----------
        i : int
            Row of the control.
        j : int
            Column of the control.

        Returns
        -------
        List[int]
            Rows of the targets in ascending order. Several rows mean a
            multi-target CNOT. Empty if the control has no target in its
            column (unless ``strict_linkage`` is set).

        Raises
        ------
        CellKindError
            If (i, j) is not a control.
        MalformedLinkageError
            In strict mode, if the group has no target or has several
            controls and several targets.
        """
        return self._partners(i, j, CellKind.CONTROL, CellKind.TARGET)

    def find_control(self, i: int, j: int) -> List[int]:
        """
        Find the controls of the CNOT whose target sits at (i, j).

        Parameters
        ----------
        i : int
            Row of the target.
        j : int
            Column of the target.

        Returns
        -------
        List[int]
            Rows of the controls in ascending order. Several rows mean a
            multi-control CNOT. Empty if the target has no control in its
            column (unless ``strict_linkage`` is set).

        Raises
        ------
        CellKindError
            If (i, j) is not a target.
        MalformedLinkageError
            In strict mode, if the group has no control or has several
            controls and several targets.
        """
        return self._partners(i, j, CellKind.TARGET, CellKind.CONTROL)

    def check_for_cnot_on_column(self, column: int) -> bool:
        """Check if any row has a CNOT control or target on ``column``."""
        return bool(np.any(gate_mask(self.column(column))))

    def cnot_groups(self, column: int) -> Dict[int, Tuple[List[int], List[int]]]:
        """
        Collect the CNOT groups present on a column.

        Returns
        -------
        Dict[int, Tuple[List[int], List[int]]]
            Group id -> (control rows, target rows), both ascending.
            Groups are ordered by the row of their first cell.
        """
        groups: Dict[int, Tuple[List[int], List[int]]] = {}
        for k, value in enumerate(self.column(column)):
            cell = decode_cell(value)
            if not cell.is_gate:
                continue
            controls, targets = groups.setdefault(cell.group, ([], []))
            if cell.kind is CellKind.CONTROL:
                controls.append(k)
            else:
                targets.append(k)
        return groups

    def validate_linkage(self) -> List[LinkageIssue]:
        """
        Check every CNOT group of the circuit.

        A well-formed group has one control and at least one target, or
        one target and at least one control.

        Returns
        -------
        List[LinkageIssue]
            One entry per malformed group, ordered by column.
        """
        issues: List[LinkageIssue] = []
        width = max((len(line) for line in self._lines), default=0)
        for j in range(width):
            for group, (controls, targets) in self.cnot_groups(j).items():
                issue = group_issue(j, group, controls, targets)
                if issue is not None:
                    issues.append(issue)
        return issues

    def check_linkage(self) -> None:
        """
        Raise if any CNOT group is malformed.

        Raises
        ------
        MalformedLinkageError
            Listing every malformed group.
        """
        issues = self.validate_linkage()
        if issues:
            details = "; ".join(str(issue) for issue in issues)
            raise MalformedLinkageError(
                f"{len(issues)} malformed CNOT group(s): {details}", issues
            )
