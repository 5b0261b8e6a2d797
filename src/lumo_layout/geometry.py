"""Geometry helpers: edge anchors on node borders and diagram bounds."""

from __future__ import annotations

import math
from collections.abc import Mapping

from lumo_layout.config import DEFAULT_CONFIG, EMPTY_BOUNDS, EPSILON, LayoutConfig
from lumo_layout.graph import Bounds, DiagramEdge, Point

# ─── Edge Anchors ─────────────────────────────────────────────────────────────


def node_center(pos: Point, config: LayoutConfig = DEFAULT_CONFIG) -> Point:
    return Point(x=pos.x + config.node_width / 2, y=pos.y + config.node_height / 2)


def rect_edge(pos: Point, target: Point, config: LayoutConfig = DEFAULT_CONFIG) -> Point:
    """Point on the border of the node at ``pos`` facing the node at ``target``.

    Both arguments are top-left corners of equally sized node boxes. The ray
    from this node's centre to the target's centre is cut at whichever side
    it crosses first. Coincident boxes return the centre.
    """
    c = node_center(pos, config)
    t = node_center(target, config)
    dx = t.x - c.x
    dy = t.y - c.y
    if abs(dx) < EPSILON and abs(dy) < EPSILON:
        return c

    hw = config.node_width / 2
    hh = config.node_height / 2
    sx = hw / abs(dx) if abs(dx) > EPSILON else math.inf
    sy = hh / abs(dy) if abs(dy) > EPSILON else math.inf
    s = min(sx, sy)
    return Point(x=c.x + dx * s, y=c.y + dy * s)


def edge_anchors(
    edge: DiagramEdge,
    positions: Mapping[str, Point],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[Point, Point] | None:
    """(start, end) anchors for an edge, or None if an endpoint was not placed."""
    src = positions.get(edge.source)
    tgt = positions.get(edge.target)
    if src is None or tgt is None:
        return None
    return rect_edge(src, tgt, config), rect_edge(tgt, src, config)


# ─── Bounds ───────────────────────────────────────────────────────────────────


def svg_bounds(positions: Mapping[str, Point], config: LayoutConfig = DEFAULT_CONFIG) -> Bounds:
    """Smallest box containing every node rectangle.

    An empty layout gets a fixed 200×100 box so a viewport is never
    degenerate. Padding is left to the renderer.
    """
    if not positions:
        return Bounds(*EMPTY_BOUNDS)

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for p in positions.values():
        min_x = min(min_x, p.x)
        min_y = min(min_y, p.y)
        max_x = max(max_x, p.x + config.node_width)
        max_y = max(max_y, p.y + config.node_height)

    return Bounds(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)
