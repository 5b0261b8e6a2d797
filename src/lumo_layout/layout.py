"""Layout module — node placement for small concept diagrams.

Two engines:
  1. Hierarchical: Kahn topological order with longest-path leveling, rows
     stacked top-down and centred on the widest row.
  2. Radial: nodes evenly spaced on a circle; used on request and as the
     fallback whenever the graph has a cycle.

Both return a fresh ``dict[str, Point]`` keyed by node id, holding the
top-left corner of each node's box.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Sequence

import networkx as nx

from lumo_layout.config import DEFAULT_CONFIG, LayoutConfig
from lumo_layout.graph import DiagramEdge, DiagramNode, LayoutHint, Point, digraph_from

logger = logging.getLogger(__name__)

# ─── Level Assignment ─────────────────────────────────────────────────────────


class LevelAssignment:
    """Result of leveling: each node is assigned a row (level 0 at the top).

    Attributes:
        levels: Maps node id → level index, in input node order.
        level_count: Total number of levels.
    """

    def __init__(self, levels: dict[str, int], level_count: int) -> None:
        self.levels = levels
        self.level_count = level_count

    @classmethod
    def assign(cls, graph: nx.DiGraph) -> LevelAssignment | None:
        """Level the graph with Kahn's algorithm, or return None on a cycle.

        Sources are seeded in graph node order. When ``u`` is dequeued, every
        successor ``v`` gets level(v) = max(level(v), level(u) + 1), so a node
        always sits strictly below all of its predecessors (diamonds included).
        If the queue drains before every node was processed the remaining
        nodes lie on or behind a cycle.
        """
        in_deg: dict[str, int] = {node_id: graph.in_degree(node_id) for node_id in graph.nodes}
        level: dict[str, int] = {}
        queue: deque[str] = deque()
        for node_id, deg in in_deg.items():
            if deg == 0:
                queue.append(node_id)
                level[node_id] = 0

        processed = 0
        while queue:
            node_id = queue.popleft()
            processed += 1
            for succ in graph.successors(node_id):
                in_deg[succ] -= 1
                level[succ] = max(level.get(succ, 0), level[node_id] + 1)
                if in_deg[succ] == 0:
                    queue.append(succ)

        if processed < graph.number_of_nodes():
            return None

        levels = {node_id: level[node_id] for node_id in graph.nodes}
        level_count = (max(levels.values()) + 1) if levels else 0
        return cls(levels=levels, level_count=level_count)

    def rows(self) -> list[list[str]]:
        """Node ids grouped by level, keeping input order inside each row."""
        rows: list[list[str]] = [[] for _ in range(self.level_count)]
        for node_id, lv in self.levels.items():
            rows[lv].append(node_id)
        return rows


def assign_levels(nodes: Sequence[DiagramNode], edges: Sequence[DiagramEdge]) -> dict[str, int] | None:
    """Map node id → level, or None when the edges contain a cycle."""
    la = LevelAssignment.assign(digraph_from(nodes, edges))
    return None if la is None else la.levels


# ─── Hierarchical Layout ──────────────────────────────────────────────────────


def row_width(count: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Width of a row of ``count`` node boxes separated by ``h_gap``."""
    if count <= 0:
        return 0.0
    return count * (config.node_width + config.h_gap) - config.h_gap


def hierarchical_layout(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> dict[str, Point] | None:
    """Top-down layered layout, or None if the graph is cyclic.

    Every row is centred horizontally within the widest row; row ``k`` sits
    at y = k * (node_height + v_gap).
    """
    graph = digraph_from(nodes, edges)
    la = LevelAssignment.assign(graph)
    if la is None:
        return None

    rows = la.rows()
    total_w = row_width(max((len(r) for r in rows), default=0), config)
    step_x = config.node_width + config.h_gap
    step_y = config.node_height + config.v_gap

    placed: dict[str, Point] = {}
    for lv, ids in enumerate(rows):
        start_x = (total_w - row_width(len(ids), config)) / 2
        for i, node_id in enumerate(ids):
            placed[node_id] = Point(x=float(start_x + i * step_x), y=float(lv * step_y))

    return {node_id: placed[node_id] for node_id in graph.nodes}


# ─── Radial Layout ────────────────────────────────────────────────────────────


def radial_radius(count: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Circle radius for ``count`` nodes: a floor, then linear growth."""
    return float(max(config.radial_min_radius, count * config.radial_spacing))


def radial_layout(nodes: Sequence[DiagramNode], config: LayoutConfig = DEFAULT_CONFIG) -> dict[str, Point]:
    """Place nodes evenly on a circle, node 0 at 12 o'clock, then clockwise.

    The circle is centred at (radius, radius) so no coordinate is negative.
    """
    positions: dict[str, Point] = {}
    n = len(nodes)
    if n == 0:
        return positions

    radius = radial_radius(n, config)
    cx = cy = radius
    for i, node in enumerate(nodes):
        angle = 2 * math.pi * i / n - math.pi / 2
        positions[node.id] = Point(x=cx + math.cos(angle) * radius, y=cy + math.sin(angle) * radius)

    return positions


# ─── Layout Selection ─────────────────────────────────────────────────────────


def select_layout(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    hint: LayoutHint | str | None = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[LayoutHint, dict[str, Point]]:
    """Run the hinted engine and report which one produced the positions.

    A radial hint goes straight to the radial engine. Anything else tries the
    hierarchical engine first and falls back to radial on a cycle.
    Raises ValueError for a hint string that names no known algorithm.
    """
    chosen = LayoutHint(hint) if hint is not None else LayoutHint.HIERARCHICAL

    if chosen is LayoutHint.HIERARCHICAL:
        positions = hierarchical_layout(nodes, edges, config)
        if positions is not None:
            return LayoutHint.HIERARCHICAL, positions
        logger.debug("cycle among %d nodes, falling back to radial layout", len(nodes))

    return LayoutHint.RADIAL, radial_layout(nodes, config)


def compute_layout(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    hint: LayoutHint | str | None = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> dict[str, Point]:
    """Positions for every node. Never fails for a finite graph."""
    _, positions = select_layout(nodes, edges, hint, config)
    return positions
