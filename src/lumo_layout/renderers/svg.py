"""SVG renderer — renders a DiagramLayout to an SVG string."""

from __future__ import annotations

from lumo_layout.graph import DiagramEdge, DiagramNode, NodeType, Point
from lumo_layout.graph import format_coord as _num
from lumo_layout.result import DiagramLayout

# ─── Constants ──────────────────────────────────────────────────────────────

FONT_SIZE = 13
FONT_FAMILY = "system-ui, sans-serif"
CORNER_RADIUS = 8
# How far an edge bows sideways, as a fraction of its length.
CURVE_BEND = 0.12

# (fill, stroke) per node style category.
_PALETTE: dict[NodeType, tuple[str, str]] = {
    NodeType.CONCEPT: ("#eef2ff", "#6366f1"),
    NodeType.PROCESS: ("#ecfdf5", "#10b981"),
    NodeType.ACTOR: ("#fff7ed", "#f97316"),
    NodeType.DATA: ("#f0f9ff", "#0ea5e9"),
    NodeType.DECISION: ("#fdf2f8", "#ec4899"),
}

_EDGE_STROKE = 'fill="none" stroke="#64748b" stroke-width="1.5"'

_STYLE = (
    "<style>"
    ".lumo-edge-animated{stroke-dasharray:6 4;animation:lumo-dash 1s linear infinite}"
    "@keyframes lumo-dash{to{stroke-dashoffset:-10}}"
    "</style>"
)


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _font(size: int = FONT_SIZE) -> str:
    return f'font-family="{FONT_FAMILY}" font-size="{size}"'


# ─── Shape Rendering ────────────────────────────────────────────────────────


def _render_node(node: DiagramNode, pos: Point, width: float, height: float) -> str:
    fill, stroke = _PALETTE[node.type]
    x, y = _num(pos.x), _num(pos.y)
    cx, cy = _num(pos.x + width / 2), _num(pos.y + height / 2)
    parts = [
        f'<g class="lumo-node lumo-node-{node.type.value}" data-id="{_escape(node.id)}">',
    ]
    if node.description:
        parts.append(f"<title>{_escape(node.description)}</title>")
    parts.append(
        f'<rect x="{x}" y="{y}" width="{_num(width)}" height="{_num(height)}" rx="{CORNER_RADIUS}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
    )
    parts.append(
        f'<text x="{cx}" y="{cy}" dominant-baseline="central" text-anchor="middle" {_font()}>'
        f"{_escape(node.label)}</text>"
    )
    parts.append("</g>")
    return "\n".join(parts)


# ─── Edge Rendering ─────────────────────────────────────────────────────────


def _control_point(start: Point, end: Point) -> Point:
    """Control point of a gentle quadratic bow, offset to the left of travel."""
    mx, my = (start.x + end.x) / 2, (start.y + end.y) / 2
    dx, dy = end.x - start.x, end.y - start.y
    return Point(x=mx - dy * CURVE_BEND, y=my + dx * CURVE_BEND)


def _render_edge(edge: DiagramEdge, start: Point, end: Point, marker: str) -> str:
    c = _control_point(start, end)
    d = f"M {_num(start.x)} {_num(start.y)} Q {_num(c.x)} {_num(c.y)} {_num(end.x)} {_num(end.y)}"
    cls = "lumo-edge lumo-edge-animated" if edge.animated else "lumo-edge"
    parts = [f'<path class="{cls}" d="{d}" {_EDGE_STROKE} marker-end="url(#{marker})"/>']

    if edge.label:
        # The curve's midpoint sits halfway between the chord midpoint and the control point.
        lx = ((start.x + end.x) / 2 + c.x) / 2
        ly = ((start.y + end.y) / 2 + c.y) / 2 - 4
        parts.append(
            f'<text x="{_num(lx)}" y="{_num(ly)}" text-anchor="middle" {_font(FONT_SIZE - 2)} fill="#475569">'
            f"{_escape(edge.label)}</text>"
        )

    return "\n".join(parts)


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer — consumes a DiagramLayout, produces an SVG string."""

    def render(self, layout: DiagramLayout) -> str:
        cfg = layout.config
        padded = layout.bounds.padded(cfg.padding)

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(padded.width)}" '
            f'height="{_num(padded.height)}" viewBox="{layout.bounds.viewbox(cfg.padding)}">',
            "<defs>",
            '  <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">',
            '    <polygon points="0 0, 10 3.5, 0 7" fill="#64748b"/>',
            "  </marker>",
            "</defs>",
            _STYLE,
        ]

        # Edges (behind nodes); edges without anchors point at unplaced nodes.
        for i, edge in enumerate(layout.edges):
            anchors = layout.anchors.get(i)
            if anchors is None:
                continue
            parts.append(_render_edge(edge, anchors[0], anchors[1], "arrowhead"))

        # Nodes (on top)
        for node in layout.nodes:
            pos = layout.positions.get(node.id)
            if pos is None:
                continue
            parts.append(_render_node(node, pos, cfg.node_width, cfg.node_height))

        parts.append("</svg>")
        return "\n".join(parts)
