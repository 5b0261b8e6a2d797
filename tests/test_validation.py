"""Tests for validation.py — caller-side payload checks."""

from __future__ import annotations

from lumo_layout.graph import DiagramEdge, DiagramNode
from lumo_layout.validation import MAX_RECOMMENDED_NODES, IssueSeverity, ValidationIssue, is_valid, validate_graph


def node(node_id: str) -> DiagramNode:
    return DiagramNode(id=node_id, label=node_id)


class TestValidateGraph:
    def test_clean_graph(self):
        """A well-formed DAG has no issues."""
        issues = validate_graph([node("a"), node("b")], [DiagramEdge("a", "b")])
        assert issues == []
        assert is_valid(issues)

    def test_empty_is_info(self):
        """An empty diagram is reported but still valid."""
        issues = validate_graph([], [])
        assert [i.severity for i in issues] == [IssueSeverity.INFO]
        assert is_valid(issues)

    def test_duplicate_ids(self):
        issues = validate_graph([node("a"), node("a")], [])
        assert len(issues) == 1
        assert issues[0].severity is IssueSeverity.ERROR
        assert issues[0].node_id == "a"
        assert not is_valid(issues)

    def test_unknown_endpoints(self):
        """Each unknown endpoint is an error tagged with the edge index."""
        issues = validate_graph([node("a")], [DiagramEdge("a", "b"), DiagramEdge("c", "d")])
        errors = [i for i in issues if i.severity is IssueSeverity.ERROR]
        assert [(i.edge_index, i.message) for i in errors] == [
            (0, "Edge references unknown node: b"),
            (1, "Edge references unknown node: c"),
            (1, "Edge references unknown node: d"),
        ]

    def test_self_loop_warning(self):
        issues = validate_graph([node("a")], [DiagramEdge("a", "a")])
        assert [i.severity for i in issues] == [IssueSeverity.WARNING]
        assert issues[0].node_id == "a"
        assert is_valid(issues)

    def test_unknown_self_loop_reported_once(self):
        """A self-loop on an unknown id is one error plus the loop warning."""
        issues = validate_graph([node("a")], [DiagramEdge("x", "x")])
        assert [i.severity for i in issues] == [IssueSeverity.ERROR, IssueSeverity.WARNING]

    def test_too_many_nodes(self):
        ns = [node(f"n{i}") for i in range(MAX_RECOMMENDED_NODES + 1)]
        issues = validate_graph(ns, [])
        assert [i.severity for i in issues] == [IssueSeverity.WARNING]

    def test_cycles_are_not_issues(self):
        """Cycles only change the layout algorithm; they are not reported."""
        assert validate_graph([node("a"), node("b")], [DiagramEdge("a", "b"), DiagramEdge("b", "a")]) == []


class TestValidationIssue:
    def test_to_dict_minimal(self):
        assert ValidationIssue(IssueSeverity.INFO, "hi").to_dict() == {"type": "info", "message": "hi"}

    def test_to_dict_full(self):
        issue = ValidationIssue(IssueSeverity.ERROR, "bad", node_id="a", edge_index=0)
        assert issue.to_dict() == {"type": "error", "message": "bad", "node_id": "a", "edge_index": 0}
