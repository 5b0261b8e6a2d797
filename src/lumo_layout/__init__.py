"""Layout and geometry engine for small concept diagrams."""

from __future__ import annotations

from lumo_layout.api import layout_diagram, render_svg
from lumo_layout.config import DEFAULT_CONFIG, LayoutConfig
from lumo_layout.geometry import edge_anchors, node_center, rect_edge, svg_bounds
from lumo_layout.graph import Bounds, DiagramEdge, DiagramNode, LayoutHint, NodeType, Point, digraph_from
from lumo_layout.layout import (
    LevelAssignment,
    assign_levels,
    compute_layout,
    hierarchical_layout,
    radial_layout,
    radial_radius,
    row_width,
    select_layout,
)
from lumo_layout.result import DiagramLayout
from lumo_layout.validation import IssueSeverity, ValidationIssue, is_valid, validate_graph

__all__ = [
    "DEFAULT_CONFIG",
    "Bounds",
    "DiagramEdge",
    "DiagramLayout",
    "DiagramNode",
    "IssueSeverity",
    "LayoutConfig",
    "LayoutHint",
    "LevelAssignment",
    "NodeType",
    "Point",
    "ValidationIssue",
    "assign_levels",
    "compute_layout",
    "digraph_from",
    "edge_anchors",
    "hierarchical_layout",
    "is_valid",
    "layout_diagram",
    "node_center",
    "radial_layout",
    "radial_radius",
    "rect_edge",
    "render_svg",
    "row_width",
    "select_layout",
    "svg_bounds",
    "validate_graph",
]
