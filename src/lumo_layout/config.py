"""Visual constants for the layout engines.

The magnitudes are tuned by eye for diagrams of up to eight nodes; the
engines only rely on their relative behaviour (fixed node box, positive gaps,
a radial floor plus linear growth per node).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Node box size, gaps and radial sizing.

    Attributes:
        node_width: Width of every rendered node rectangle.
        node_height: Height of every rendered node rectangle.
        h_gap: Horizontal gap between neighbours in one hierarchical row.
        v_gap: Vertical gap between hierarchical rows.
        padding: Margin the renderer adds around the bounds.
        radial_min_radius: Smallest circle radius for the radial layout.
        radial_spacing: Radius added per node once above the floor.
    """

    node_width: float = 130
    node_height: float = 46
    h_gap: float = 28
    v_gap: float = 80
    padding: float = 24
    radial_min_radius: float = 110
    radial_spacing: float = 28

    def __post_init__(self) -> None:
        if self.node_width <= 0 or self.node_height <= 0:
            raise ValueError("node dimensions must be positive")
        if self.h_gap < 0 or self.v_gap < 0 or self.padding < 0:
            raise ValueError("gaps and padding must not be negative")
        if self.radial_min_radius <= 0 or self.radial_spacing <= 0:
            raise ValueError("radial sizing must be positive")


DEFAULT_CONFIG = LayoutConfig()

# Viewport used when there is nothing to lay out.
EMPTY_BOUNDS: tuple[float, float, float, float] = (0, 0, 200, 100)

# Below this, a coordinate difference counts as zero in edge clipping.
EPSILON = 0.01
