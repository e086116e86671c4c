"""Public convenience API."""

from __future__ import annotations

from typing import Any

from modgraph.layout import full_layout
from modgraph.layout.types import LayoutResult
from modgraph.renderers.asy import AsyRenderer
from modgraph.renderers.neato import NeatoRenderer


def layout_modulus(m: int, **options: Any) -> LayoutResult:
    """Lay out the graph of squares mod ``m``; ``options`` go to ``full_layout``."""
    return full_layout(m, **options)


def render_neato(m: int, **options: Any) -> str:
    """Lay out the graph of squares mod ``m`` with its partition and render it as neato text."""
    options.setdefault("partition", True)
    return NeatoRenderer().render(full_layout(m, **options))


def render_asy(m: int, **options: Any) -> str:
    """Lay out the graph of squares mod ``m`` and render it as an Asymptote scene."""
    return AsyRenderer().render(full_layout(m, **options))
