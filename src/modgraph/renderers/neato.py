"""Neato renderer — renders a LayoutResult to Graphviz (neato) text."""

from __future__ import annotations

from modgraph.layout.types import LayoutNode, LayoutResult

# ─── Constants ──────────────────────────────────────────────────────────────

INDENT = "   "
COMPLEMENT_STYLE = 'style="dotted", arrowhead="none", color="gray"'
SUBGRAPH_COLORS = ("black", "blue", "red", "darkgreen", "purple", "orange", "brown", "teal")


def _pos(ln: LayoutNode) -> str:
    x, y, z = ln.position
    return f"{x:.4f},{y:.4f},{z:.4f}"


def _render_node(ln: LayoutNode) -> str:
    return f'{ln.index} [pos="{_pos(ln)}"]'


def _render_edges(ln: LayoutNode, color: str | None) -> list[str]:
    attrs = f' [color="{color}"]' if color else ""
    lines = [f"{ln.index} -> {ln.next}{attrs}"]
    # Each complementary pair is drawn once, from its smaller member.
    if ln.complement is not None and ln.index < ln.complement:
        lines.append(f"{ln.index} -> {ln.complement} [{COMPLEMENT_STYLE}]")
    return lines


# ─── Public Renderer ────────────────────────────────────────────────────────


class NeatoRenderer:
    """Neato renderer — consumes a LayoutResult, produces a ``digraph`` string.

    When the result carries a partition, every subgraph becomes a cluster and
    its edges are coloured by subgraph id.
    """

    def render(self, result: LayoutResult) -> str:
        parts = ["digraph G {", f"{INDENT}dim=3;"]

        if result.subgraphs is None:
            for ln in result.nodes:
                parts.append(f"{INDENT}{_render_node(ln)}")
            for ln in result.nodes:
                parts.extend(f"{INDENT}{line}" for line in _render_edges(ln, None))
        else:
            for sg in result.subgraphs:
                color = SUBGRAPH_COLORS[sg.id % len(SUBGRAPH_COLORS)]
                parts.append(f"{INDENT}subgraph cluster_{sg.id} {{")
                for member in sg.members:
                    parts.append(f"{INDENT * 2}{_render_node(result.nodes[member])}")
                for member in sg.members:
                    parts.extend(f"{INDENT * 2}{line}" for line in _render_edges(result.nodes[member], color))
                parts.append(f"{INDENT}}}")

        parts.append("}")
        return "\n".join(parts) + "\n"
