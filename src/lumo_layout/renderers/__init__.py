"""Renderers turning a DiagramLayout into output text."""

from lumo_layout.renderers.base import Renderer
from lumo_layout.renderers.svg import SvgRenderer

__all__ = ["Renderer", "SvgRenderer"]
