"""Caller-side payload checks.

The layout engines trust their input. Hosts that receive nodes and edges
from an untrusted source can run ``validate_graph`` first and decide what to
do with the issues; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from lumo_layout.graph import DiagramEdge, DiagramNode

# Diagrams above this size stop reading well in either layout.
MAX_RECOMMENDED_NODES = 8


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""

    ERROR = "error"  # the layout output will be incomplete or wrong
    WARNING = "warning"  # renders, but probably not what was meant
    INFO = "info"


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in a node/edge payload."""

    severity: IssueSeverity
    message: str
    node_id: str | None = None
    edge_index: int | None = None

    def to_dict(self) -> dict:
        result: dict = {"type": self.severity.value, "message": self.message}
        if self.node_id is not None:
            result["node_id"] = self.node_id
        if self.edge_index is not None:
            result["edge_index"] = self.edge_index
        return result


def validate_graph(nodes: Sequence[DiagramNode], edges: Sequence[DiagramEdge]) -> list[ValidationIssue]:
    """Return every issue found, in a stable order.

    Checks for:
    - Duplicate node ids - ERROR
    - Edges naming an unknown node - ERROR
    - Self-referencing edges - WARNING (forces the radial fallback)
    - More nodes than fit comfortably - WARNING
    - Empty diagram - INFO
    """
    issues: list[ValidationIssue] = []

    if not nodes:
        issues.append(ValidationIssue(IssueSeverity.INFO, "Diagram has no nodes"))

    seen: set[str] = set()
    for node in nodes:
        if node.id in seen:
            issues.append(ValidationIssue(IssueSeverity.ERROR, f"Duplicate node id: {node.id}", node_id=node.id))
        seen.add(node.id)

    if len(seen) > MAX_RECOMMENDED_NODES:
        issues.append(
            ValidationIssue(
                IssueSeverity.WARNING,
                f"{len(seen)} nodes; diagrams read best with at most {MAX_RECOMMENDED_NODES}",
            )
        )

    for i, edge in enumerate(edges):
        for end in dict.fromkeys((edge.source, edge.target)):
            if end not in seen:
                issues.append(
                    ValidationIssue(IssueSeverity.ERROR, f"Edge references unknown node: {end}", edge_index=i)
                )
        if edge.source == edge.target:
            issues.append(
                ValidationIssue(
                    IssueSeverity.WARNING,
                    "Self-referencing edge (node points to itself)",
                    node_id=edge.source,
                    edge_index=i,
                )
            )

    return issues


def is_valid(issues: Sequence[ValidationIssue]) -> bool:
    """True when no issue is an error."""
    return not any(i.severity is IssueSeverity.ERROR for i in issues)
