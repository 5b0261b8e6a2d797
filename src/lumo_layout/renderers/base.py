"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from lumo_layout.result import DiagramLayout


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, layout: DiagramLayout) -> str:
        """Render a laid-out diagram to an output string."""
        ...
