"""Asymptote renderer — renders a LayoutResult to a 3-D Asymptote scene."""

from __future__ import annotations

import math

from modgraph.layout.types import LayoutNode, LayoutResult

# ─── Constants ──────────────────────────────────────────────────────────────

OUTFORMAT = "pdf"
UNIT_CM = 1.0
SPHERE_SCALE = 0.25
SPHERE_COLOR = "white"
SPHERE_OPACITY = 0.5
LABEL_COLOR = "black"
ARROW_GRAY = 0.6
ARROW_INSET = 0.25  # gap left between an arrow's tips and the spheres it joins
CAMERA_DISTANCE = 2.0  # camera sits this many biggest radii from the origin

Vec = tuple[float, float, float]


def _pos(v: Vec) -> str:
    return f"({v[0]:g},{v[1]:g},{v[2]:g})"


def _header() -> str:
    return f'settings.outformat = "{OUTFORMAT}";\nsettings.prc = false;\nunitsize({UNIT_CM:g}cm);\nimport three;\n'


def _perspective(camera: Vec) -> str:
    return f"currentprojection = perspective{_pos(camera)};\n"


def _render_sphere(ln: LayoutNode) -> str:
    return (
        f"draw(shift{_pos(ln.position)}*scale3({SPHERE_SCALE:g})*unitsphere,"
        f"{SPHERE_COLOR}+opacity({SPHERE_OPACITY:g}));\n"
    )


def _render_label(ln: LayoutNode) -> str:
    return f'label("{ln.index}",{_pos(ln.position)},{LABEL_COLOR},Billboard);\n'


def _render_arrow(src: LayoutNode, dst: LayoutNode) -> str:
    """Arrow from ``src`` toward ``dst``, pulled in by ARROW_INSET at both ends."""
    d = [b - a for a, b in zip(src.position, dst.position)]
    r = math.hypot(*d)
    q = [c / r * ARROW_INSET for c in d]
    begin = (src.position[0] + q[0], src.position[1] + q[1], src.position[2] + q[2])
    end = (dst.position[0] - q[0], dst.position[1] - q[1], dst.position[2] - q[2])
    return f"draw({_pos(begin)}--{_pos(end)},arrow=Arrow3(),p=gray({ARROW_GRAY:g}),light=currentlight);\n"


# ─── Public Renderer ────────────────────────────────────────────────────────


class AsyRenderer:
    """Asymptote renderer — consumes a LayoutResult, produces an ``.asy`` scene.

    Each node is a translucent sphere with a camera-facing label; each
    ``i -> next(i)`` edge other than a self-loop is an arrow. The camera looks
    along +y from twice the largest node radius.
    """

    def render(self, result: LayoutResult) -> str:
        camera = (0.0, -CAMERA_DISTANCE * result.biggest_radius(), 0.0)
        parts = [_header(), _perspective(camera)]
        for ln in result.nodes:
            parts.append(_render_sphere(ln))
            parts.append(_render_label(ln))
            if ln.next != ln.index:
                parts.append(_render_arrow(ln, result.nodes[ln.next]))
        return "".join(parts)
