"""Renderers that turn a LayoutResult into text for external tools."""

from modgraph.renderers.asy import AsyRenderer
from modgraph.renderers.base import Renderer
from modgraph.renderers.neato import NeatoRenderer

__all__ = ["AsyRenderer", "NeatoRenderer", "Renderer"]
