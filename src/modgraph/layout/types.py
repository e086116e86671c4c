"""Shared layout types and tuning constants."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from modgraph.errors import InvalidDimension
from modgraph.partition import Subgraph

# ─── Potential Scales ─────────────────────────────────────────────────────────
#
# The force scale is set by universal repulsion, which has unit value between
# two nodes at unit distance. Each attraction term is a spring whose constant
# is the reciprocal of its scale, so a larger scale means a weaker spring.

EDGE_ATTRACT: float = 1.5  # nodes joined by a directed edge
SUM_ATTRACT: float = 15.0  # (i + j) % m is a factor f of m, or m - f
FACTOR_ATTRACT: float = 150.0  # i or j is a factor f of m, or m - f

# ─── Minimizer Settings ───────────────────────────────────────────────────────

MAX_ITERATIONS: int = 1_000_000
GRADIENT_TOLERANCE: float = 1.0e-4  # Euclidean norm of the gradient
SIMPLEX_SIZE_TOLERANCE: float = 0.1
SIMPLEX_INITIAL_STEP: float = 10.0


@dataclass(frozen=True)
class PotentialScales:
    """Scale constants of the three attraction terms."""

    edge_attract: float = EDGE_ATTRACT
    sum_attract: float = SUM_ATTRACT
    factor_attract: float = FACTOR_ATTRACT


@dataclass(frozen=True)
class LayoutNode:
    """A positioned node, as handed to renderers.

    Attributes:
        index: Node number in ``0..m-1``.
        position: Final (x, y, z) position.
        next: Index of the node this one maps to.
        subgraph: Subgraph id, or None when no partition was computed.
        complement: Node ``m - index`` when distinct from ``m`` and ``index``.
    """

    index: int
    position: tuple[float, float, float]
    next: int
    subgraph: int | None = None
    complement: int | None = None


@dataclass
class LayoutResult:
    """Outcome of a full layout run."""

    modulus: int
    nodes: list[LayoutNode] = field(default_factory=list)
    subgraphs: list[Subgraph] | None = None
    potential: float = 0.0
    iterations: int = 0
    converged: bool = True

    def biggest_radius(self) -> float:
        """Largest distance of any node from the origin."""
        return max((math.dist(n.position, (0.0, 0.0, 0.0)) for n in self.nodes), default=0.0)


# ─── Position Vectors ─────────────────────────────────────────────────────────


def flatten(positions: np.ndarray) -> np.ndarray:
    """Flatten ``(m, 3)`` positions into a vector ``[x0, y0, z0, x1, ...]``."""
    return np.asarray(positions, dtype=float).reshape(-1).copy()


def unflatten(x: np.ndarray) -> np.ndarray:
    """Present a flattened vector as ``(m, 3)`` positions.

    Raises:
        InvalidDimension: ``len(x)`` is not a multiple of three.
    """
    x = np.asarray(x, dtype=float)
    if x.size % 3 != 0:
        raise InvalidDimension(x.size)
    return x.reshape(-1, 3)
