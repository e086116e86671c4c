"""Layout module — 3-D embedding of the graph of squares mod m.

Pipeline:
  1. Graph construction (``modgraph.graph``)
  2. Partition into connected subgraphs (optional)
  3. Random initial positions in a cube
  4. Potential minimization (``minimizer``)
"""

from __future__ import annotations

import logging

import numpy as np

from modgraph.graph import Graph
from modgraph.layout.minimizer import Minimizer, MinimizeResult, Strategy, initial_positions
from modgraph.layout.potential import Evaluation, PotentialModel
from modgraph.layout.types import (
    EDGE_ATTRACT,
    FACTOR_ATTRACT,
    GRADIENT_TOLERANCE,
    MAX_ITERATIONS,
    SIMPLEX_INITIAL_STEP,
    SIMPLEX_SIZE_TOLERANCE,
    SUM_ATTRACT,
    LayoutNode,
    LayoutResult,
    PotentialScales,
    flatten,
    unflatten,
)
from modgraph.partition import compute_partition

logger = logging.getLogger(__name__)

__all__ = [
    "EDGE_ATTRACT",
    "FACTOR_ATTRACT",
    "GRADIENT_TOLERANCE",
    "MAX_ITERATIONS",
    "SIMPLEX_INITIAL_STEP",
    "SIMPLEX_SIZE_TOLERANCE",
    "SUM_ATTRACT",
    "Evaluation",
    "LayoutNode",
    "LayoutResult",
    "MinimizeResult",
    "Minimizer",
    "PotentialModel",
    "PotentialScales",
    "Strategy",
    "flatten",
    "full_layout",
    "initial_positions",
    "unflatten",
]


def full_layout(
    m: int,
    strategy: Strategy = Strategy.GRADIENT,
    scales: PotentialScales | None = None,
    seed: int | None = None,
    partition: bool = False,
    side: float | None = None,
    max_iterations: int = MAX_ITERATIONS,
    include_one: bool = False,
) -> LayoutResult:
    """Run the full layout pipeline for modulus ``m``.

    Args:
        m: Modulus; the graph has nodes ``0..m-1``.
        strategy: Minimization method.
        scales: Attraction scale constants; defaults when None.
        seed: Seed for the initial positions.
        partition: Also compute the connected subgraphs.
        side: Edge length of the cube holding the initial positions.
        max_iterations: Iteration cap for the minimizer.
        include_one: Count 1 among the factors of m for the sum and factor
            attractions.

    Raises:
        InvalidModulus: ``m`` is negative.
    """
    graph = Graph(m)

    subgraph_ids: list[int | None] = [None] * m
    subgraphs = None
    if partition:
        subgraphs = compute_partition(graph)
        for sg in subgraphs:
            for member in sg.members:
                subgraph_ids[member] = sg.id
        logger.debug("m=%d splits into %d subgraphs", m, len(subgraphs))

    model = PotentialModel(graph, scales, include_one)
    rng = np.random.default_rng(seed)
    start = initial_positions(m, rng, side)
    outcome = Minimizer(model, strategy, max_iterations=max_iterations).run(start)

    nodes = [
        LayoutNode(
            index=i,
            position=(float(p[0]), float(p[1]), float(p[2])),
            next=graph.next(i),
            subgraph=subgraph_ids[i],
            complement=graph.complement(i),
        )
        for i, p in enumerate(outcome.positions)
    ]

    return LayoutResult(
        modulus=m,
        nodes=nodes,
        subgraphs=subgraphs,
        potential=outcome.potential,
        iterations=outcome.iterations,
        converged=outcome.converged,
    )
