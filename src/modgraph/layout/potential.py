"""Composite pair potential for the 3-D layout.

Every pair of nodes repels by an inverse-square law. On top of that, a pair
may be pulled together by springs for three reasons:

  - edge:   one node maps to the other;
  - sum:    ``(i + j) % m`` is a factor ``f`` of ``m``, or ``m - f``;
  - factor: ``i`` or ``j`` is itself a factor ``f`` of ``m``, or ``m - f``.

Springs with different constants acting on the same pair add up to a single
spring, so each pair carries one combined spring constant that depends only
on the indices. It is computed once per model.

Sign convention: ``pair_force(i, j, d)`` is the force felt by ``i`` from
``j`` where ``d = pos[j] - pos[i]``. Forces are the negative gradient of the
potential.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from modgraph.graph import Graph
from modgraph.layout.types import PotentialScales, unflatten
from modgraph.numtheory import factors_of


@dataclass
class Evaluation:
    """Potential and forces for one set of positions.

    Attributes:
        potential: Total potential of the system.
        pair_forces: ``(m, m, 3)`` table; ``pair_forces[i, j]`` is the force
            felt by node ``i`` from node ``j``.
        net_forces: ``(m, 3)`` net force on each node.
    """

    potential: float
    pair_forces: np.ndarray
    net_forces: np.ndarray

    @property
    def gradient(self) -> np.ndarray:
        """Flattened gradient of the potential (negative net force)."""
        return -self.net_forces.ravel()


def repulsion(d: np.ndarray) -> tuple[np.ndarray, float]:
    """Inverse-square repulsion felt by one node from another at displacement ``d``."""
    r = float(np.linalg.norm(d))
    u = d / r
    return -u / (r * r), 1.0 / r


def attraction(k: float, d: np.ndarray) -> tuple[np.ndarray, float]:
    """Spring attraction with constant ``k`` felt by one node from another at displacement ``d``."""
    r = float(np.linalg.norm(d))
    return d * k, 0.5 * k * r * r


class PotentialModel:
    """Pairwise forces and potential for the nodes of one ``Graph``."""

    def __init__(self, graph: Graph, scales: PotentialScales | None = None, include_one: bool = False) -> None:
        self.graph = graph
        self.scales = scales or PotentialScales()
        self.factors = factors_of(graph.modulus, include_one)
        self._springs: np.ndarray | None = None

    # ─── Spring Constants ─────────────────────────────────────────────────

    def edge_constant(self, i: int, j: int) -> float:
        """Spring constant from a directed edge between ``i`` and ``j``."""
        if self.graph.next(i) == j or self.graph.next(j) == i:
            return 1.0 / self.scales.edge_attract
        return 0.0

    def sum_constant(self, i: int, j: int) -> float:
        """Spring constant from ``(i + j) % m`` matching a factor of ``m``.

        Proportional to the factor, except that a sum of ``0`` (that is,
        ``m``) gets the full constant.
        """
        m = self.graph.modulus
        c = 1.0 / self.scales.sum_attract
        s = (i + j) % m
        k = 0.0
        for f in self.factors:
            a = c * f / m
            if s == f:
                k += c if f == 0 else a
            if m - s == f:
                k += a
        return k

    def factor_constant(self, i: int, j: int) -> float:
        """Spring constant from ``i`` or ``j`` matching a factor of ``m``.

        Proportional to the factor, except that node ``0`` gets the full
        constant.
        """
        m = self.graph.modulus
        c = 1.0 / self.scales.factor_attract
        k = 0.0
        for f in self.factors:
            a = c * f / m
            if i == f or j == f:
                k += c if f == 0 else a
            if i == m - f or j == m - f:
                k += a
        return k

    def spring_constant(self, i: int, j: int) -> float:
        """Combined spring constant of every attraction acting on ``i`` and ``j``."""
        return self.edge_constant(i, j) + self.sum_constant(i, j) + self.factor_constant(i, j)

    @property
    def springs(self) -> np.ndarray:
        """Symmetric ``(m, m)`` matrix of combined spring constants."""
        if self._springs is None:
            m = self.graph.modulus
            springs = np.zeros((m, m))
            for i in range(m):
                for j in range(i + 1, m):
                    springs[i, j] = springs[j, i] = self.spring_constant(i, j)
            self._springs = springs
        return self._springs

    # ─── Forces ───────────────────────────────────────────────────────────

    def pair_force(self, i: int, j: int, d: np.ndarray) -> tuple[np.ndarray, float]:
        """Force felt by ``i`` from ``j`` and the pair's potential.

        Args:
            i: Offset of one node.
            j: Offset of the other node, ``j != i``.
            d: Displacement ``pos[j] - pos[i]``.
        """
        d = np.asarray(d, dtype=float)
        force, potential = repulsion(d)
        k = self.spring_constant(i, j)
        if k:
            spring, spring_potential = attraction(k, d)
            force = force + spring
            potential += spring_potential
        return force, potential

    def evaluate(self, positions: np.ndarray) -> Evaluation:
        """Compute every pair force, the net forces and the total potential.

        Args:
            positions: ``(m, 3)`` array of node positions.
        """
        positions = np.asarray(positions, dtype=float)
        m = self.graph.modulus
        pair_forces = np.zeros((m, m, 3))
        if m < 2:
            return Evaluation(potential=0.0, pair_forces=pair_forces, net_forces=np.zeros((m, 3)))

        iu, ju = np.triu_indices(m, k=1)
        d = positions[ju] - positions[iu]
        r = np.linalg.norm(d, axis=1)
        k = self.springs[iu, ju]

        # Force on i from j: repulsion -d/r^3 plus spring k*d.
        f = d * (k - 1.0 / r**3)[:, None]
        pair_forces[iu, ju] = f
        pair_forces[ju, iu] = -f

        potential = float(np.sum(1.0 / r + 0.5 * k * r * r))
        return Evaluation(potential=potential, pair_forces=pair_forces, net_forces=pair_forces.sum(axis=1))

    # ─── Optimizer Callbacks ──────────────────────────────────────────────

    def objective(self, x: np.ndarray) -> float:
        """Potential at flattened positions ``x``."""
        return self.evaluate(unflatten(x)).potential

    def objective_and_gradient(self, x: np.ndarray) -> tuple[float, np.ndarray]:
        """Potential and its gradient at flattened positions ``x``."""
        ev = self.evaluate(unflatten(x))
        return ev.potential, ev.gradient
