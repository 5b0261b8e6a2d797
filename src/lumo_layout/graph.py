"""Graph model: plain records describing a concept diagram.

Nodes and edges arrive from the widget payload already validated by the host.
Everything here is immutable; layout functions read these records and return
fresh position maps.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import networkx as nx

# ─── Enumerations ─────────────────────────────────────────────────────────────


class NodeType(str, Enum):
    """Style category for a node. Only the renderer's palette looks at it."""

    CONCEPT = "concept"
    PROCESS = "process"
    ACTOR = "actor"
    DATA = "data"
    DECISION = "decision"


class LayoutHint(str, Enum):
    """Caller preference for the layout algorithm."""

    HIERARCHICAL = "hierarchical"
    RADIAL = "radial"


# ─── Records ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DiagramNode:
    """A labeled box in the diagram."""

    id: str
    label: str
    type: NodeType = NodeType.CONCEPT
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramNode:
        """Build a node from a widget payload dict.

        Raises KeyError when ``id`` is missing and ValueError for an unknown
        ``type``.
        """
        node_id = data["id"]
        return cls(
            id=node_id,
            label=data.get("label", node_id),
            type=NodeType(data.get("type", NodeType.CONCEPT.value)),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class DiagramEdge:
    """A directed connection between two node ids.

    The payload spells the endpoints ``from``/``to``; ``from`` is a Python
    keyword so the fields are named ``source``/``target``.
    """

    source: str
    target: str
    label: str | None = None
    animated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramEdge:
        source = data["from"] if "from" in data else data["source"]
        target = data["to"] if "to" in data else data["target"]
        return cls(
            source=source,
            target=target,
            label=data.get("label"),
            animated=bool(data.get("animated", False)),
        )


@dataclass(frozen=True)
class Point:
    """A 2D point in diagram units (the same units as node width/height)."""

    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box enclosing every rendered node rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def padded(self, pad: float) -> Bounds:
        """Grow the box by ``pad`` on every side."""
        return Bounds(self.min_x - pad, self.min_y - pad, self.max_x + pad, self.max_y + pad)

    def viewbox(self, pad: float = 0) -> str:
        """SVG ``viewBox`` attribute value for the padded box."""
        b = self.padded(pad)
        return f"{format_coord(b.min_x)} {format_coord(b.min_y)} {format_coord(b.width)} {format_coord(b.height)}"


def format_coord(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` for whole numbers."""
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return str(rounded)


# ─── networkx view ────────────────────────────────────────────────────────────


def digraph_from(nodes: Iterable[DiagramNode], edges: Iterable[DiagramEdge]) -> nx.DiGraph:
    """Build a DiGraph whose node and successor order follow the input order.

    Each graph node carries its record under ``data``. Edges whose endpoints
    are not both in ``nodes`` are left out; parallel duplicates collapse
    into one graph edge.
    """
    g: nx.DiGraph = nx.DiGraph()
    for node in nodes:
        g.add_node(node.id, data=node)
    for edge in edges:
        if edge.source in g and edge.target in g:
            g.add_edge(edge.source, edge.target, data=edge)
    return g
