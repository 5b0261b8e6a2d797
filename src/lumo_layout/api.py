"""Public pipeline: layout → edge anchors → bounds → optional SVG."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lumo_layout.config import DEFAULT_CONFIG, LayoutConfig
from lumo_layout.geometry import edge_anchors, svg_bounds
from lumo_layout.graph import DiagramEdge, DiagramNode, LayoutHint, Point
from lumo_layout.layout import select_layout
from lumo_layout.renderers.base import Renderer
from lumo_layout.renderers.svg import SvgRenderer
from lumo_layout.result import DiagramLayout

logger = logging.getLogger(__name__)


def layout_diagram(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    hint: LayoutHint | str | None = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> DiagramLayout:
    """Lay out a diagram and compute everything a renderer needs."""
    requested = LayoutHint(hint) if hint is not None else LayoutHint.HIERARCHICAL
    algorithm, positions = select_layout(nodes, edges, requested, config)

    anchors: dict[int, tuple[Point, Point]] = {}
    for i, edge in enumerate(edges):
        pair = edge_anchors(edge, positions, config)
        if pair is None:
            logger.debug("edge %d (%s -> %s) has an unplaced endpoint", i, edge.source, edge.target)
            continue
        anchors[i] = pair

    return DiagramLayout(
        nodes=list(nodes),
        edges=list(edges),
        positions=positions,
        anchors=anchors,
        bounds=svg_bounds(positions, config),
        algorithm=algorithm,
        requested=requested,
        config=config,
    )


def render_svg(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    hint: LayoutHint | str | None = None,
    config: LayoutConfig = DEFAULT_CONFIG,
    renderer: Renderer | None = None,
) -> str:
    """Lay out and render a diagram, to SVG unless another renderer is given."""
    renderer = renderer if renderer is not None else SvgRenderer()
    return renderer.render(layout_diagram(nodes, edges, hint, config))
