"""Layout output shared between the pipeline and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

from lumo_layout.config import DEFAULT_CONFIG, LayoutConfig
from lumo_layout.graph import Bounds, DiagramEdge, DiagramNode, LayoutHint, Point


@dataclass
class DiagramLayout:
    """Self-contained layout output, everything renderers need.

    ``anchors`` is keyed by the edge's index in ``edges``; edges with an
    unplaced endpoint have no entry. ``requested`` is the caller's hint and
    ``algorithm`` the engine that actually produced ``positions``.
    """

    nodes: list[DiagramNode]
    edges: list[DiagramEdge]
    positions: dict[str, Point]
    anchors: dict[int, tuple[Point, Point]]
    bounds: Bounds
    algorithm: LayoutHint
    requested: LayoutHint = LayoutHint.HIERARCHICAL
    config: LayoutConfig = field(default=DEFAULT_CONFIG)

    @property
    def used_fallback(self) -> bool:
        """True when a hierarchical request ended up radial because of a cycle."""
        return self.algorithm is not self.requested
