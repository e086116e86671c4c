"""Potential minimization over the flattened 3m-dimensional position vector.

Two strategies are available, chosen once per ``Minimizer``:

  - SIMPLEX:  derivative-free Nelder-Mead; only the potential is evaluated.
  - GRADIENT: nonlinear conjugate gradient; uses the potential and its
              gradient, which is the negative of the net force.

Running out of iterations, or a method giving up for lack of progress, is a
normal way to stop: the last vector is kept and a warning is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np
from scipy.optimize import OptimizeResult, minimize

from modgraph.layout.potential import PotentialModel
from modgraph.layout.types import (
    GRADIENT_TOLERANCE,
    MAX_ITERATIONS,
    SIMPLEX_INITIAL_STEP,
    SIMPLEX_SIZE_TOLERANCE,
    flatten,
    unflatten,
)

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Numerical method used to minimize the potential."""

    SIMPLEX = "nelder-mead"
    GRADIENT = "cg"


@dataclass
class MinimizeResult:
    """Final state of one minimization run.

    Attributes:
        positions: ``(m, 3)`` array of final node positions.
        potential: Potential at ``positions``.
        iterations: Number of iterations performed.
        converged: True if the method met its tolerance.
        message: The method's own description of how it stopped.
    """

    positions: np.ndarray
    potential: float
    iterations: int
    converged: bool
    message: str = ""

def initial_positions(m: int, rng: np.random.Generator, side: float | None = None) -> np.ndarray:
    """Random positions, uniform in a cube centred on the origin.

    Args:
        m: Number of nodes.
        rng: Source of randomness.
        side: Edge length of the cube; defaults to ``m``.
    """
    side = float(m) if side is None else side
    return rng.uniform(-0.5 * side, 0.5 * side, size=(m, 3))


def simplex_around(x0: np.ndarray, step: float) -> np.ndarray:
    """Initial Nelder-Mead simplex: ``x0`` and one vertex stepped away from it along each axis."""
    n = x0.size
    sim = np.tile(x0, (n + 1, 1))
    sim[1:] += step * np.eye(n)
    return sim


class Minimizer:
    """Drive scipy's minimizer over the potential of a ``PotentialModel``."""

    def __init__(
        self,
        model: PotentialModel,
        strategy: Strategy = Strategy.GRADIENT,
        max_iterations: int = MAX_ITERATIONS,
        gradient_tolerance: float = GRADIENT_TOLERANCE,
        size_tolerance: float = SIMPLEX_SIZE_TOLERANCE,
        initial_step: float = SIMPLEX_INITIAL_STEP,
    ) -> None:
        self.model = model
        self.strategy = strategy
        self.max_iterations = max_iterations
        self.gradient_tolerance = gradient_tolerance
        self.size_tolerance = size_tolerance
        self.initial_step = initial_step

    def run(self, positions: np.ndarray) -> MinimizeResult:
        """Minimize the potential starting from ``positions``.

        Args:
            positions: ``(m, 3)`` starting positions; not modified.

        Returns:
            The final positions and how the run ended.
        """
        x0 = flatten(unflatten(positions))
        if x0.size == 0:
            return MinimizeResult(positions=np.zeros((0, 3)), potential=0.0, iterations=0, converged=True)

        logger.debug("minimizing %d coordinates with %s", x0.size, self.strategy.value)
        iteration = 0

        def progress(intermediate_result: OptimizeResult) -> None:
            nonlocal iteration
            iteration += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%5d f()=%8.4f", iteration, intermediate_result.fun)

        if self.strategy is Strategy.SIMPLEX:
            res = self._simplex(x0, progress)
        else:
            res = self._gradient(x0, progress)

        final = unflatten(res.x).copy()
        converged = bool(res.success)
        message = str(res.message)
        if converged:
            logger.info("converged to minimum after %d iterations, f()=%.4f", res.nit, res.fun)
        else:
            logger.warning("minimizer did not converge after %d iterations: %s", res.nit, message)

        return MinimizeResult(
            positions=final,
            potential=float(res.fun),
            iterations=int(res.nit),
            converged=converged,
            message=message,
        )

    def _simplex(self, x0: np.ndarray, callback: Callable[[OptimizeResult], None]) -> OptimizeResult:
        return minimize(
            self.model.objective,
            x0,
            method="Nelder-Mead",
            callback=callback,
            options={
                "maxiter": self.max_iterations,
                "initial_simplex": simplex_around(x0, self.initial_step),
                "xatol": self.size_tolerance,
                # Only the simplex size decides convergence.
                "fatol": np.inf,
            },
        )

    def _gradient(self, x0: np.ndarray, callback: Callable[[OptimizeResult], None]) -> OptimizeResult:
        return minimize(
            self.model.objective_and_gradient,
            x0,
            method="CG",
            jac=True,
            callback=callback,
            options={
                "maxiter": self.max_iterations,
                "gtol": self.gradient_tolerance,
                "norm": 2,
            },
        )
