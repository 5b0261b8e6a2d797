"""Tests for graph.py and config.py — payload records and layout configuration."""

from __future__ import annotations

import dataclasses

import pytest

from lumo_layout.config import DEFAULT_CONFIG, LayoutConfig
from lumo_layout.graph import DiagramEdge, DiagramNode, LayoutHint, NodeType

# ─── DiagramNode Tests ────────────────────────────────────────────────────────


class TestDiagramNode:
    def test_from_dict_full(self):
        """All payload fields map onto the record."""
        n = DiagramNode.from_dict({"id": "db", "label": "Database", "type": "data", "description": "Stores rows"})
        assert n == DiagramNode(id="db", label="Database", type=NodeType.DATA, description="Stores rows")

    def test_from_dict_defaults(self):
        """Missing label falls back to the id, missing type to concept."""
        n = DiagramNode.from_dict({"id": "x"})
        assert n.label == "x"
        assert n.type is NodeType.CONCEPT
        assert n.description is None

    def test_from_dict_missing_id(self):
        with pytest.raises(KeyError):
            DiagramNode.from_dict({"label": "orphan"})

    def test_from_dict_unknown_type(self):
        """Only the five style categories are accepted."""
        with pytest.raises(ValueError):
            DiagramNode.from_dict({"id": "a", "type": "widget"})

    def test_frozen(self):
        """Records cannot be mutated by the engines."""
        n = DiagramNode(id="a", label="A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            n.label = "B"  # type: ignore[misc]

    def test_node_types(self):
        assert {t.value for t in NodeType} == {"concept", "process", "actor", "data", "decision"}


# ─── DiagramEdge Tests ────────────────────────────────────────────────────────


class TestDiagramEdge:
    def test_from_dict_wire_names(self):
        """The payload's from/to become source/target."""
        e = DiagramEdge.from_dict({"from": "a", "to": "b", "label": "calls", "animated": True})
        assert e == DiagramEdge(source="a", target="b", label="calls", animated=True)

    def test_from_dict_source_target(self):
        """source/target spellings are accepted too."""
        e = DiagramEdge.from_dict({"source": "a", "target": "b"})
        assert (e.source, e.target, e.label, e.animated) == ("a", "b", None, False)

    def test_from_dict_missing_endpoint(self):
        with pytest.raises(KeyError):
            DiagramEdge.from_dict({"from": "a"})


class TestLayoutHint:
    def test_values(self):
        assert LayoutHint("radial") is LayoutHint.RADIAL
        assert LayoutHint("hierarchical") is LayoutHint.HIERARCHICAL

    def test_str_enum(self):
        """Hints compare equal to their wire strings."""
        assert LayoutHint.RADIAL == "radial"


# ─── LayoutConfig Tests ───────────────────────────────────────────────────────


class TestLayoutConfig:
    def test_defaults(self):
        """Default visual constants for the widget."""
        assert DEFAULT_CONFIG.node_width == 130
        assert DEFAULT_CONFIG.node_height == 46
        assert DEFAULT_CONFIG.h_gap == 28
        assert DEFAULT_CONFIG.v_gap == 80
        assert DEFAULT_CONFIG.padding == 24
        assert DEFAULT_CONFIG.radial_min_radius == 110
        assert DEFAULT_CONFIG.radial_spacing == 28

    def test_replace(self):
        """Variants are derived with dataclasses.replace."""
        cfg = dataclasses.replace(DEFAULT_CONFIG, v_gap=40)
        assert cfg.v_gap == 40
        assert cfg.node_width == DEFAULT_CONFIG.node_width

    @pytest.mark.parametrize(
        "kwargs",
        [{"node_width": 0}, {"node_height": -1}, {"h_gap": -5}, {"padding": -1}, {"radial_spacing": 0}],
    )
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)
